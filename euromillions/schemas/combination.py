"""Pydantic schema for a generated game combination."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from euromillions.config import settings


class Combination(BaseModel):
    model_config = {"from_attributes": True, "frozen": True}

    main_numbers: list[int]
    star_numbers: list[int] = Field(default_factory=list)
    strategy: str
    order_index: int = 0
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("main_numbers")
    @classmethod
    def _sorted_unique_mains(cls, value: list[int]) -> list[int]:
        if len(set(value)) != len(value):
            raise ValueError(f"Main numbers must be distinct: {value}")
        return sorted(value)

    @field_validator("star_numbers")
    @classmethod
    def _sorted_stars(cls, value: list[int]) -> list[int]:
        return sorted(value)

    @property
    def is_valid(self) -> bool:
        """Exactly 5 mains in 1-50 and 2 stars in 1-12."""
        return (
            len(self.main_numbers) == settings.DRAW_SIZE
            and all(1 <= n <= settings.MAX_NUMBER for n in self.main_numbers)
            and len(self.star_numbers) == settings.STAR_COUNT
            and all(1 <= s <= settings.MAX_STAR for s in self.star_numbers)
        )
