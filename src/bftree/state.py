from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .errors import make_underflow_error


def _fresh_tape() -> np.ndarray:
    return np.zeros(1, dtype=np.uint8)


@dataclass
class TapeState:
    """
    Tape memory and the data pointer.

    The tape starts as one zero cell and gains a zero cell each time the
    pointer steps onto its end.
    """

    tape: np.ndarray = field(default_factory=_fresh_tape)
    pointer: int = 0

    def reset(self) -> None:
        self.tape = _fresh_tape()
        self.pointer = 0

    @property
    def length(self) -> int:
        return len(self.tape)

    def current(self) -> int:
        return int(self.tape[self.pointer])

    def add(self, delta: int) -> None:
        self.tape[self.pointer] = (self.current() + delta) % 256

    def shift(self, delta: int) -> None:
        target = self.pointer + delta
        if target < 0:
            raise make_underflow_error(pointer=self.pointer, delta=delta, tape_length=self.length)
        while self.length <= target:
            self.tape = np.append(self.tape, np.uint8(0))
        self.pointer = target
