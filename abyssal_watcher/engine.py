"""Asynchronous engine running a check strategy on a fixed interval."""

import asyncio
import enum
import logging

from abyssal_watcher.watcher import CheckStrategy

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 2.0
QUEUE_CAPACITY = 32


class EngineCommand(enum.Enum):
    """Commands that can be sent to a running engine."""

    TICK = "tick"


class Engine:
    """Runs its strategy periodically and reacts to manual commands."""

    def __init__(self, strategy: CheckStrategy, interval: float = DEFAULT_INTERVAL) -> None:
        self.strategy = strategy
        self.interval = interval
        self.checks = 0
        self.threats = 0
        self.manual_ticks = 0
        self._queue: asyncio.Queue[EngineCommand] | None = None
        self._task: asyncio.Task[None] | None = None
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the engine loop on the running event loop."""
        if self.running:
            raise RuntimeError("engine already started")
        self._queue = asyncio.Queue(maxsize=QUEUE_CAPACITY)
        self._task = asyncio.get_running_loop().create_task(self._run())

    def trigger(self) -> None:
        """Send a manual tick command to the engine."""
        if not self.running or self._queue is None:
            raise RuntimeError("engine is not running")
        try:
            self._queue.put_nowait(EngineCommand.TICK)
        except asyncio.QueueFull:
            task = asyncio.get_running_loop().create_task(
                self._queue.put(EngineCommand.TICK)
            )
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    async def stop(self) -> None:
        """Stop the engine loop and wait for it to finish."""
        for task in list(self._pending):
            task.cancel()
        self._pending.clear()
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    def _tick(self) -> None:
        self.checks += 1
        if self.strategy.check():
            self.threats += 1
            logger.warning("Threat detected by engine.")
        else:
            logger.info("System check passed.")

    def _handle(self, command: EngineCommand) -> None:
        if command is EngineCommand.TICK:
            self.manual_ticks += 1
            logger.debug("Manual tick triggered.")

    async def _run(self) -> None:
        assert self._queue is not None
        loop = asyncio.get_running_loop()
        next_tick = loop.time()
        while True:
            timeout = max(0.0, next_tick - loop.time())
            try:
                command = await asyncio.wait_for(self._queue.get(), timeout)
            except asyncio.TimeoutError:
                self._tick()
                next_tick += self.interval
                continue
            self._handle(command)