"""Supported devices and the values that settings and bindings take."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable, Optional, Union

from gmousectl.color import Color
from gmousectl.keys import Key

VENDOR_ID = 0x258A
FEATURE_INTERFACE = 0x02


class Device(IntEnum):
    """Product ids of the supported mice."""

    MODEL_O = 0x2011
    MODEL_D = 0x2012
    MODEL_O_MINUS = 0x2013
    MODEL_D_MINUS = 0x2025
    WIRED_MODEL_O = 0x2022
    WIRED_MODEL_D = 0x2023
    WIRED_MODEL_O_MINUS = 0x2024


def is_supported_product(product_id: int) -> bool:
    """Whether the product id belongs to a supported mouse."""
    return any(product_id == device for device in Device)


def is_wired(product_id: int) -> bool:
    """Whether the connection with this product id is the wired one."""
    return product_id <= 0x2013


class ScrollDirection(Enum):
    DEFAULT = "default"
    INVERT = "invert"


class Button(Enum):
    LEFT = "left"
    RIGHT = "right"
    SCROLL = "scroll"
    FORWARD = "forward"
    BACK = "back"
    DPI_BTN = "dpi-btn"
    SCROLL_UP = "scroll-up"
    SCROLL_DOWN = "scroll-down"


class MouseFn(Enum):
    LEFT = "left"
    RIGHT = "right"
    SCROLL = "scroll"
    FORWARD = "forward"
    BACK = "back"
    SCROLL_UP = "scroll-up"
    SCROLL_DOWN = "scroll-down"
    PROFILE_CYCLE_UP = "profile-cycle-up"
    PROFILE_CYCLE_DOWN = "profile-cycle-down"
    BATTERY_STATUS = "battery-status"


class KeyboardFn(Enum):
    PROFILE_CYCLE_UP = "profile-cycle-up"
    PROFILE_CYCLE_DOWN = "profile-cycle-down"
    LAYER_CYCLE_UP = "layer-cycle-up"
    LAYER_CYCLE_DOWN = "layer-cycle-down"


class DPIFn(Enum):
    STAGE_UP = "stage-up"
    STAGE_DOWN = "stage-down"
    CYCLE_UP = "cycle-up"
    CYCLE_DOWN = "cycle-down"


class MediaFn(Enum):
    PLAYER = "player"
    PLAY_PAUSE = "play-pause"
    NEXT = "next"
    PREVIOUS = "previous"
    STOP = "stop"
    MUTE = "mute"
    VOLUME_UP = "volume-up"
    VOLUME_DOWN = "volume-down"


class EffectKind(Enum):
    GLORIOUS = "glorious"
    CYCLE = "cycle"
    PULSE = "pulse"
    SOLID = "solid"
    PULSE_ONE = "pulse-one"
    TAIL = "tail"
    RAVE = "rave"
    WAVE = "wave"
    OFF = "off"

    @property
    def takes_rate(self) -> bool:
        return self not in (EffectKind.SOLID, EffectKind.OFF)

    @property
    def color_count(self) -> tuple[int, int]:
        """Smallest and largest number of colours the effect takes."""
        return _COLOR_COUNTS.get(self, (0, 0))


_COLOR_COUNTS = {
    EffectKind.PULSE: (2, 6),
    EffectKind.SOLID: (1, 1),
    EffectKind.PULSE_ONE: (1, 1),
    EffectKind.RAVE: (1, 2),
}


@dataclass(frozen=True)
class Effect:
    """An LED effect; ``rate`` of None means the default rate."""

    kind: EffectKind
    rate: Optional[int] = None
    colors: tuple[Color, ...] = field(default=())

    def __init__(
        self,
        kind: EffectKind,
        rate: Optional[int] = None,
        colors: Iterable[Color] = (),
    ) -> None:
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "rate", rate)
        object.__setattr__(self, "colors", tuple(colors))
        self._validate()

    def _validate(self) -> None:
        if self.rate is not None:
            if not self.kind.takes_rate:
                raise ValueError(f"effect '{self.kind.value}' takes no rate")
            if not 0 <= self.rate <= 100:
                raise ValueError("rate must be in the range of 0-100")
        low, high = self.kind.color_count
        if not low <= len(self.colors) <= high:
            if low == high:
                raise ValueError(f"effect '{self.kind.value}' takes {low} color(s)")
            raise ValueError(f"effect '{self.kind.value}' takes {low} to {high} colors")


@dataclass(frozen=True)
class KeyBinding:
    """A single key, optionally with a modifier key held."""

    key: Key
    modifier: Optional[Key] = None

    def __post_init__(self) -> None:
        if self.modifier is not None and not self.modifier.is_modifier:
            raise ValueError(f"'{self.modifier.code}' is not a valid modifier")


@dataclass(frozen=True)
class NoBinding:
    """A button that does nothing."""


Binding = Union[KeyBinding, KeyboardFn, MouseFn, DPIFn, MediaFn, NoBinding]