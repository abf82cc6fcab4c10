"""Number and ``start:stop[:step]`` range parsing for the command line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from rkz.errors import RangeError


def parse_number(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        raise RangeError(f"Can't parse {text} as a number") from None


@dataclass(frozen=True)
class ValueRange:
    """Inclusive range of values; a single value is a range with one element."""

    start: float
    stop: float
    step: float = 1.0

    @classmethod
    def parse(cls, text: str) -> ValueRange:
        """Parse ``value``, ``start:stop`` or ``start:stop:step``.

        Raises:
            RangeError: On a malformed number, a stop not above start, a
                non-positive step or more than three fields.
        """
        values = [parse_number(part) for part in text.split(":")]

        if len(values) == 1:
            return cls(values[0], values[0])
        if len(values) not in (2, 3):
            raise RangeError(f'Can\'t parse "{text}" as a range')

        start, stop = values[0], values[1]
        step = values[2] if len(values) == 3 else 1.0
        if stop <= start:
            raise RangeError("Range stop must be higher than start")
        if step <= 0.0:
            raise RangeError("Range step must be positive")
        return cls(start, stop, step)

    @property
    def is_scalar(self) -> bool:
        return self.start + self.step > self.stop

    def __iter__(self) -> Iterator[float]:
        value = self.start
        while value <= self.stop:
            yield value
            value += self.step

    def values(self) -> list[float]:
        return list(self)
