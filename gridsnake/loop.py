"""Fixed-interval clock driving the world simulation."""

from __future__ import annotations

import asyncio
import enum
import logging
from typing import Awaitable, Callable, Optional

from . import constants
from .world import World


class LoopState(enum.Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class GameLoop:
    """Own the single ticking task of a :class:`World`.

    :meth:`start` only moves ``STOPPED`` to ``RUNNING``; calling it while the
    loop runs does nothing. Must be used from inside a running asyncio loop.
    """

    def __init__(
        self,
        world: World,
        interval: float = constants.TICK_INTERVAL,
        after_tick: Optional[Callable[[], Awaitable[None]]] = None,
        on_quit: Optional[Callable[[], None]] = None,
    ) -> None:
        self.world = world
        self.interval = interval
        self.after_tick = after_tick
        self.on_quit = on_quit
        self.state = LoopState.STOPPED
        self._task: Optional[asyncio.Task[None]] = None

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    def start(self) -> bool:
        """Reset the world and begin ticking. Returns ``False`` if already running."""

        if self.state is LoopState.RUNNING:
            return False
        self.world.reset()
        self.state = LoopState.RUNNING
        self._task = asyncio.get_running_loop().create_task(self._run())
        logging.info("Game loop started, one tick every %.3fs", self.interval)
        return True

    def stop(self) -> None:
        if self.state is LoopState.STOPPED:
            return
        self.state = LoopState.STOPPED
        if self._task is not None:
            self._task.cancel()
            self._task = None
        logging.info("Game loop stopped after %s ticks", self.world.tick_count)

    def quit(self) -> None:
        """Stop ticking, release every entity and notify ``on_quit``."""

        self.stop()
        self.world.reset()
        if self.on_quit is not None:
            self.on_quit()

    async def _run(self) -> None:
        while self.state is LoopState.RUNNING:
            try:
                self.world.tick()
                if self.after_tick is not None:
                    await self.after_tick()
            except Exception:
                logging.exception("Tick %s failed", self.world.tick_count)
            await asyncio.sleep(self.interval)
