"""
Alias-number generation for the short URL service.

SequentialStrategy:
    Maintains a process-local, monotonically increasing counter and hands out
    the next integer on every call. It is the `next_alias` counter of the
    AliasStore: drawn exactly once per newly created record, starting at 1.

Notes:
    - Counters are not persisted; a restart begins again at 1.
    - `generate()` is thread-safe on its own, but the AliasStore still draws
      from it while holding its own lock so that "lookup, draw, append" is
      one atomic step.
"""

import itertools
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator


class BaseStrategy(ABC):
    """Abstract base for alias generation strategies."""

    @abstractmethod
    def generate(self) -> int:
        """Return the next alias. Never returns the same value twice."""
        raise NotImplementedError


@dataclass
class SequentialStrategy(BaseStrategy):
    """
    Counter-based strategy: start, start + 1, start + 2, ...

    Properties:
    - Collision-free within a single process (no retries required)
    - Strictly increasing by exactly one per call
    """
    start: int = 1
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)
    _counter: Iterator[int] = field(default=None, init=False, repr=False, compare=False)  # type: ignore

    def __post_init__(self):
        if self.start < 1:
            raise ValueError("start must be a positive integer")
        # Instantiate the counter at runtime so each strategy owns its own iterator.
        self._counter = itertools.count(self.start)

    def generate(self) -> int:
        with self._lock:
            return next(self._counter)
