"""Generated game combination ORM model."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from euromillions.db.base import Base


class GameCombination(Base):
    __tablename__ = "game_combinations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    main_numbers: Mapped[list[int]] = mapped_column(JSON, nullable=False)
    star_numbers: Mapped[list[int]] = mapped_column(JSON, nullable=False, default=list)
    strategy: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, unique=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now, index=True)

    def __repr__(self) -> str:
        return f"<GameCombination #{self.order_index} {self.main_numbers} {self.strategy}>"
