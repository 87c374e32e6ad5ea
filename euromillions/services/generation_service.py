"""Generation orchestrator — draws candidates until enough pass the filters.

The loop itself is synchronous and CPU-bound. ``generate_async`` runs it
in the default executor and persists the accepted combinations.
"""

import asyncio
import random
import threading
import time
import weakref
from collections.abc import Callable, Iterable
from enum import Enum
from functools import partial

from loguru import logger
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from euromillions.config import settings
from euromillions.data.store import DataStore
from euromillions.db.crud import combination as crud
from euromillions.drawing.joker_draw import JokerWeightedHistoryAlgorithm
from euromillions.drawing.list_draw import ListDrawingAlgorithm, default_stars
from euromillions.drawing.strategy import DrawingStrategy
from euromillions.errors import (
    DrawingError,
    InputValidationError,
    InvalidDrawCountError,
    MaxAttemptsExceededError,
)
from euromillions.filters.draw_filters import DrawFilter, FilterConfig, check_combination
from euromillions.schemas.combination import Combination
from euromillions.services.drawing_service import DrawingService


class GenerationState(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class GenerationEvent(BaseModel):
    kind: str  # attempt / accepted / draw_error / finished
    attempt: int
    accepted: int
    numbers: list[int] | None = None
    error: str | None = None


class GenerationResult(BaseModel):
    accepted: list[list[int]]
    attempts: int
    requested: int
    state: GenerationState

    @property
    def is_partial(self) -> bool:
        return len(self.accepted) < self.requested


Observer = Callable[[GenerationEvent], None]

# order index allocation, one lock per running loop
_save_locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = (
    weakref.WeakKeyDictionary()
)


def _save_lock() -> asyncio.Lock:
    loop = asyncio.get_running_loop()
    lock = _save_locks.get(loop)
    if lock is None:
        lock = _save_locks[loop] = asyncio.Lock()
    return lock


def generate(
    service: DrawingService,
    count: int,
    strategy: DrawingStrategy | str,
    history: list[list[int]],
    preferred_numbers: list[int] | None = None,
    filter_config: FilterConfig | None = None,
    *,
    max_attempts: int = settings.MAX_ATTEMPTS,
    pause_every: int = settings.PAUSE_EVERY,
    pause_seconds: float = settings.PAUSE_SECONDS,
    observer: Observer | None = None,
    cancel_event: threading.Event | None = None,
    extra_filters: Iterable[DrawFilter] = (),
) -> GenerationResult:
    """Draw with ``strategy`` until ``count`` draws pass the filter pipeline.

    A failed single draw counts as an attempt. Every ``pause_every`` failed
    draws the loop sleeps ``pause_seconds``.

    Raises:
        InvalidDrawCountError: ``count`` is not positive.
        MaxAttemptsExceededError: the ceiling was hit with nothing accepted.
    """
    if count <= 0:
        raise InvalidDrawCountError(f"Cannot generate {count} combinations")

    strategy = DrawingStrategy(strategy)
    service.validate_request(strategy, preferred_numbers)
    filter_config = filter_config or FilterConfig()
    extra_filters = list(extra_filters)

    def notify(kind: str, numbers: list[int] | None = None, error: str | None = None) -> None:
        if observer is not None:
            observer(GenerationEvent(
                kind=kind, attempt=attempts, accepted=len(accepted),
                numbers=numbers, error=error,
            ))

    accepted: list[list[int]] = []
    attempts = 0
    state = GenerationState.GENERATING
    logger.info("[generate] {} x{} | max_attempts={}", strategy.value, count, max_attempts)

    while len(accepted) < count and attempts < max_attempts:
        if cancel_event is not None and cancel_event.is_set():
            state = GenerationState.CANCELLED
            break

        attempts += 1
        notify("attempt")
        try:
            numbers = service.generate_draw(strategy, preferred_numbers)
        except (DrawingError, InputValidationError) as e:
            logger.debug("[generate] attempt {} draw error: {}", attempts, e.description)
            notify("draw_error", error=e.description)
            if pause_every > 0 and attempts % pause_every == 0:
                time.sleep(pause_seconds)
            continue

        if check_combination(numbers, accepted, history, filter_config, extra_filters):
            accepted.append(numbers)
            notify("accepted", numbers=numbers)

    if state is GenerationState.GENERATING:
        if not accepted:
            state = GenerationState.FAILED
            notify("finished")
            logger.error("[generate] {} failed after {} attempts", strategy.value, attempts)
            raise MaxAttemptsExceededError(attempts)
        state = GenerationState.COMPLETED

    notify("finished")
    result = GenerationResult(
        accepted=accepted, attempts=attempts, requested=count, state=state,
    )
    if result.is_partial:
        logger.warning(
            "[generate] {} partial result: {}/{} after {} attempts ({})",
            strategy.value, len(accepted), count, attempts, state.value,
        )
    else:
        logger.info("[generate] {} done: {} in {} attempts", strategy.value, count, attempts)
    return result


def draw_stars(
    store: DataStore,
    count: int,
    rng: random.Random | None = None,
    weighted: bool = False,
) -> list[list[int]]:
    """Two stars for each of ``count`` combinations."""
    rng = rng or random.Random()
    if weighted and store.flat_stars:
        algorithm = JokerWeightedHistoryAlgorithm(
            store.flat_stars, rng, default_range=(1, settings.MAX_STAR)
        )
    else:
        algorithm = ListDrawingAlgorithm(default_stars(), rng)
    return [algorithm.draw(settings.STAR_COUNT) for _ in range(count)]


def build_combinations(
    accepted: list[list[int]],
    strategy: DrawingStrategy | str,
    start_index: int,
    stars: list[list[int]] | None = None,
) -> list[Combination]:
    """Wrap raw draws as combinations numbered ``start_index + 1`` onward."""
    strategy = DrawingStrategy(strategy)
    stars = stars or [[] for _ in accepted]
    return [
        Combination(
            main_numbers=numbers,
            star_numbers=star_numbers,
            strategy=strategy.value,
            order_index=start_index + i + 1,
        )
        for i, (numbers, star_numbers) in enumerate(zip(accepted, stars))
    ]


async def generate_async(
    session: AsyncSession,
    service: DrawingService,
    count: int,
    strategy: DrawingStrategy | str,
    preferred_numbers: list[int] | None = None,
    filter_config: FilterConfig | None = None,
    weighted_stars: bool = False,
    **kwargs,
) -> tuple[GenerationResult, list[Combination]]:
    """Run ``generate`` off the event loop and store the accepted combinations.

    The highest order index is read and the new rows committed under one
    lock, so concurrent calls never hand out the same index.
    """
    loop = asyncio.get_event_loop()
    result = await loop.run_in_executor(
        None,
        partial(
            generate,
            service,
            count,
            strategy,
            service.store.draws,
            preferred_numbers,
            filter_config,
            **kwargs,
        ),
    )

    stars = draw_stars(service.store, len(result.accepted), service.rng, weighted_stars)
    async with _save_lock():
        highest = await crud.get_highest_order_index(session)
        combinations = build_combinations(result.accepted, strategy, highest, stars)
        await crud.save_combinations(session, combinations)
        await session.commit()
    logger.info(
        "[generate] saved {} combinations from order index {}",
        len(combinations), highest + 1,
    )
    return result, combinations
