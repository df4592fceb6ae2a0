"""Lifecycle shared by incremental pipeline stages."""
from abc import ABC, abstractmethod


class Processor(ABC):
    """
    An incremental stage driven from outside.

    Protocol: ``config(params)`` once, ``input(data)`` once, then ``tick()``
    until it returns True, then ``output()``. Each tick does a bounded unit
    of work so the caller can report progress or stop between ticks.
    """

    @abstractmethod
    def config(self, params) -> bool:
        ...

    @abstractmethod
    def input(self, data) -> bool:
        ...

    @abstractmethod
    def tick(self) -> bool:
        """Advance one unit of work. Returns True once finished."""

    @abstractmethod
    def progress(self) -> int:
        """Completion percentage in 0..100."""

    @abstractmethod
    def output(self):
        ...

    def run(self) -> int:
        """Tick until done. Returns the number of ticks that did work."""
        ticks = 0
        while not self.tick():
            ticks += 1
        return ticks
