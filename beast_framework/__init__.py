"""
Beast battler framework.

Provides game-specific systems built on top of beast_engine:
- Battle (elements, attacks, beasts, menu, turn coordinator)
- World (overworld player controller)
"""
