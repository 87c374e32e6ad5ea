"""CRUD operations for generated game combinations."""

from datetime import datetime

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from euromillions.db.models.combination import GameCombination
from euromillions.schemas.combination import Combination


def _to_row(combination: Combination) -> GameCombination:
    return GameCombination(
        main_numbers=list(combination.main_numbers),
        star_numbers=list(combination.star_numbers),
        strategy=combination.strategy,
        order_index=combination.order_index,
        created_at=combination.created_at,
    )


async def save_combinations(
    session: AsyncSession, combinations: list[Combination]
) -> list[GameCombination]:
    rows = [_to_row(c) for c in combinations]
    session.add_all(rows)
    await session.flush()
    return rows


async def load_combinations(session: AsyncSession) -> list[GameCombination]:
    result = await session.execute(
        select(GameCombination).order_by(GameCombination.order_index)
    )
    return list(result.scalars().all())


async def delete_all(session: AsyncSession) -> int:
    result = await session.execute(delete(GameCombination))
    return result.rowcount or 0


async def count(session: AsyncSession) -> int:
    result = await session.execute(select(func.count(GameCombination.id)))
    return result.scalar_one()


async def query_by_date_range(
    session: AsyncSession, start: datetime, end: datetime
) -> list[GameCombination]:
    result = await session.execute(
        select(GameCombination)
        .where(GameCombination.created_at >= start, GameCombination.created_at <= end)
        .order_by(GameCombination.order_index)
    )
    return list(result.scalars().all())


async def query_by_strategy(session: AsyncSession, strategy: str) -> list[GameCombination]:
    result = await session.execute(
        select(GameCombination)
        .where(GameCombination.strategy == strategy)
        .order_by(GameCombination.order_index)
    )
    return list(result.scalars().all())


async def get_highest_order_index(session: AsyncSession) -> int:
    """Highest stored order index, -1 when the table is empty."""
    result = await session.execute(select(func.max(GameCombination.order_index)))
    highest = result.scalar_one_or_none()
    return -1 if highest is None else highest
