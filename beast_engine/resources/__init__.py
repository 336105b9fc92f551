"""Static data loading."""

from beast_engine.resources.database import Database

__all__ = ["Database"]
