"""ORM models package."""

from euromillions.db.models.combination import GameCombination

__all__ = ["GameCombination"]
