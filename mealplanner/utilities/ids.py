"""Identifier generation for planner meals.

Ids look like ``planner-<n>-<ms>``: an increasing per-generator counter plus a
coarse millisecond timestamp. Callers that inject no generator share
DEFAULT_ID_GENERATOR, so ids stay unique across the process; tests inject their
own generator with a fixed clock to get reproducible ids.
"""
from __future__ import annotations
import time
from threading import Lock
from typing import Callable, Optional

from mealplanner.utilities.config import PLANNER_ID_PREFIX

IdFactory = Callable[[], str]


class IdGenerator:
    def __init__(self, prefix: str = PLANNER_ID_PREFIX, clock: Optional[Callable[[], float]] = None):
        self.prefix = prefix
        self._clock = clock or time.time
        self._counter = 0
        self._lock = Lock()

    def next_id(self) -> str:
        with self._lock:
            self._counter += 1
            n = self._counter
        millis = int(self._clock() * 1000)
        return f"{self.prefix}-{n}-{millis}"

    __call__ = next_id

    @property
    def issued(self) -> int:
        '''Number of ids handed out so far.'''
        return self._counter


DEFAULT_ID_GENERATOR = IdGenerator()

__all__ = ['IdFactory', 'IdGenerator', 'DEFAULT_ID_GENERATOR']
