"""Decoding of raw terminal input into input events."""

from dataclasses import dataclass
from typing import List, Union

from .viewport import Direction


# =============================================================================
# Input Events
# =============================================================================

@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Pan:
    direction: Direction


@dataclass(frozen=True)
class Zoom:
    inward: bool


@dataclass(frozen=True)
class IterAdjust:
    """Raise (+1) or lower (-1) the iteration cap by one step."""
    sign: int


@dataclass(frozen=True)
class ToggleColor:
    pass


@dataclass(frozen=True)
class SelectPreset:
    index: int


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class Unknown:
    data: bytes = b""


InputEvent = Union[Quit, Pan, Zoom, IterAdjust, ToggleColor, SelectPreset, Reset, Unknown]


# =============================================================================
# Decoder
# =============================================================================

CTRL_C = b"\x03"

KEY_EVENTS = {
    b"q": Quit(),
    CTRL_C: Quit(),
    b"r": Reset(),
    b"c": ToggleColor(),
    b"1": SelectPreset(1),
    b"2": SelectPreset(2),
    b"3": SelectPreset(3),
    b"4": SelectPreset(4),
    b"5": SelectPreset(5),
    b"+": Zoom(inward=True),
    b"=": Zoom(inward=True),
    b"-": Zoom(inward=False),
    b"]": IterAdjust(+1),
    b"[": IterAdjust(-1),
    b"\x1b[A": Pan(Direction.UP),
    b"\x1b[B": Pan(Direction.DOWN),
    b"\x1b[C": Pan(Direction.RIGHT),
    b"\x1b[D": Pan(Direction.LEFT),
}


ESC = 0x1B
CSI_PREFIX = b"\x1b["


def decode_key(key: bytes) -> InputEvent:
    """Map a single key (one byte or one escape sequence) to an event."""
    return KEY_EVENTS.get(key, Unknown(key))


def decode(data: bytes) -> List[InputEvent]:
    """Split a chunk of raw input into events, in arrival order.

    Keys typed while a frame is rendering queue up in the terminal and come
    back from one read together, so a chunk may hold several keys. `ESC [ X`
    is taken as one three-byte key, anything else one byte at a time.
    """
    events = []
    pos = 0
    while pos < len(data):
        if data[pos] == ESC and data[pos:pos + 2] == CSI_PREFIX:
            # A sequence cut short at the end of the chunk stays one key
            size = 3
        else:
            size = 1
        events.append(decode_key(data[pos:pos + size]))
        pos += size
    return events
