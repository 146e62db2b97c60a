from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class Shift:
    delta: int  # net >/<, positive is rightward


@dataclass(frozen=True)
class Add:
    delta: int  # net +/- on current cell, wrapped mod 256 when run


@dataclass(frozen=True)
class Loop:
    body: List["Node"] = field(default_factory=list)


@dataclass(frozen=True)
class Print:
    pass


@dataclass(frozen=True)
class Input:
    pass  # recognized, does nothing yet


Node = Union[Shift, Add, Loop, Print, Input]
