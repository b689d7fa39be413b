"""Periodic system integrity checking with a pluggable strategy."""

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable

logger = logging.getLogger(__name__)


class CheckStrategy(ABC):
    """A strategy for checking the system."""

    @abstractmethod
    def check(self) -> bool:
        """Run the check; return True when a threat was found."""


class DefaultCheck(CheckStrategy):
    """Default integrity check that only records that it ran."""

    def check(self) -> bool:
        logger.info("Performing default system integrity check...")
        return False


class Watcher:
    """Runs its strategy at most once every two whole seconds."""

    def __init__(
        self,
        strategy: CheckStrategy,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.strategy = strategy
        self._clock = clock
        self.last_check = clock()

    def monitor(self) -> bool:
        """Run the strategy if more than one whole second has passed.

        Returns True if the strategy ran.
        """
        now = self._clock()
        if int(now - self.last_check) > 1:
            self.strategy.check()
            self.last_check = self._clock()
            return True
        return False