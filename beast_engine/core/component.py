"""
Component base class for data-only models.

Components are pure data containers: authored attacks, beast
configuration and similar records. Pydantic gives them validation
and JSON round-tripping for free.

Usage:
    class Attack(Component):
        name: str
        strength: float = 0.0
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all data components.

    Components use Pydantic for:
    - Automatic validation
    - JSON serialization
    - Type hints
    - Default values

    IMPORTANT: Do NOT add methods that modify state.
    Runtime state lives in the objects that wrap components.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra='forbid',
    )
