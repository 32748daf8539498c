"""
Server-side countdown driver.

Delivers one tick per interval to an interview session until it is no
longer active. The session itself never schedules anything.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Optional

from interview_sim.core.config import TICK_INTERVAL_SECONDS
from interview_sim.services.interview_session import InterviewError, InterviewSession

logger = logging.getLogger(__name__)


class Countdown:
    """
    Tick a session on a fixed cadence.

    Args:
        tick: Zero-argument callable applying one tick and returning the
            updated session (usually interview_service.tick bound to a key)
        interval: Seconds between ticks
        sleep: Awaitable sleep, replaceable in tests
    """

    def __init__(
        self,
        tick: Callable[[], InterviewSession],
        interval: float = TICK_INTERVAL_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._tick = tick
        self.interval = interval
        self._sleep = sleep

    async def run(self, on_tick: Optional[Callable[[InterviewSession], Awaitable[None]]] = None) -> int:
        """
        Tick until the session leaves the active state.

        Args:
            on_tick: Awaited with the updated session after every tick

        Returns:
            Number of ticks delivered
        """
        ticks = 0
        while True:
            await self._sleep(self.interval)
            try:
                session = self._tick()
            except InterviewError as e:
                # Completed or reset by a concurrent answer/reset call
                logger.info(f"Countdown stopped: {e}")
                break

            ticks += 1
            if on_tick is not None:
                await on_tick(session)
            if not session.is_active:
                break

        return ticks
