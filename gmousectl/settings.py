"""Writing the mouse's settings."""

from __future__ import annotations

import time
from typing import Iterable, Optional, Sequence, Union

from gmousectl.bindings import DEFAULT_PROFILE, set_binding
from gmousectl.color import Color
from gmousectl.hid import REPORT_SIZE, FeatureDevice
from gmousectl.model import Button, Effect, EffectKind, MouseFn, ScrollDirection
from gmousectl.status import check_sleep

RATE_DEFAULT = 40
LIFT_OFF_DISTANCES = (1, 2)
POLLING_RATES = (1, 2, 4, 8)
PROFILES = (1, 2, 3)

_EFFECT_IDS = {
    EffectKind.OFF: 0x00,
    EffectKind.GLORIOUS: 0x01,
    EffectKind.CYCLE: 0x02,
    EffectKind.PULSE: 0x03,
    EffectKind.SOLID: 0x04,
    EffectKind.PULSE_ONE: 0x05,
    EffectKind.TAIL: 0x06,
    EffectKind.RAVE: 0x07,
    EffectKind.WAVE: 0x08,
}


def _command(header: Sequence[int], payload: Iterable[int] = ()) -> bytes:
    """A report with a four-byte header at 3 and its payload from 7 on."""
    data = bytes(payload)
    if 7 + len(data) > REPORT_SIZE:
        raise ValueError("payload does not fit in a feature report")
    report = bytearray(REPORT_SIZE)
    report[3:7] = bytes(header)
    report[7:7 + len(data)] = data
    return bytes(report)


def _profile(profile: Optional[int]) -> int:
    return DEFAULT_PROFILE if profile is None else profile


def _byte(value: int, name: str) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in the range 0-255")
    return value


def rate_value(rate: Optional[int], kind: EffectKind) -> int:
    """The byte the device expects for an effect rate of 0-100."""
    value = RATE_DEFAULT if rate is None else rate
    if not 0 <= value <= 100:
        raise ValueError("rate must be in the range of 0-100")
    if kind in (EffectKind.RAVE, EffectKind.WAVE):
        return (105 - value) * 2
    return (105 - value) // 5


def set_profile(device: FeatureDevice, profile_id: int) -> None:
    """Make a profile the active one."""
    check_sleep(device)
    device.send_feature_report(_command((0x02, 0x01, 0x00, 0x05), (profile_id,)))


def set_debounce(device: FeatureDevice, profile: Optional[int], ms: int) -> None:
    """Set the button debounce time in milliseconds."""
    check_sleep(device)
    device.send_feature_report(_command((0x02, 0x01, 0x00, 0x08), (_profile(profile), ms)))


def set_dpi_colors(device: FeatureDevice, profile: Optional[int], colors: Iterable[Color]) -> None:
    """Set the colour shown for each DPI stage."""
    check_sleep(device)
    payload = bytes((_profile(profile),)) + b"".join(bytes(color) for color in colors)
    device.send_feature_report(_command((0x02, 0x13, 0x02, 0x01), payload))


def set_dpi_stage(device: FeatureDevice, profile: Optional[int], stage: int) -> None:
    """Select the active DPI stage."""
    check_sleep(device)
    device.send_feature_report(_command((0x02, 0x02, 0x01, 0x02), (_profile(profile), stage)))


def set_dpi_stages(device: FeatureDevice, profile: Optional[int], stages: Sequence[int]) -> None:
    """Set the DPI value of every stage."""
    values = b"".join(stage.to_bytes(2, "big") * 2 for stage in stages)
    payload = bytes((_profile(profile), len(stages))) + values
    device.send_feature_report(_command((0x02, 0x12, 0x01, 0x01), payload))


def set_led_brightness(device: FeatureDevice, wired: int, wireless: Optional[int]) -> None:
    """Set LED brightness for wired use and, separately, wireless use."""
    check_sleep(device)
    header = (0x02, 0x02, 0x02, 0x02)
    device.send_feature_report(_command(header, (0x01, wired)))
    time.sleep(0.03)
    device.send_feature_report(_command(header, (0x00, wired if wireless is None else wireless)))


def set_led_effect(device: FeatureDevice, profile: Optional[int], effect: Effect) -> None:
    """Set the LED effect of a profile."""
    check_sleep(device)
    kind = effect.kind
    rate = rate_value(effect.rate, kind) if kind.takes_rate else 0
    colors = b"".join(bytes(color) for color in effect.colors)
    trailer = b"\xff" if kind is EffectKind.CYCLE else b""
    payload = bytes((_profile(profile), 0xFF, _EFFECT_IDS[kind], 0x00, rate)) + colors + trailer
    header = (0x02, 5 + 3 * len(effect.colors), 0x02, 0x00)
    device.send_feature_report(_command(header, payload))


def set_lift_off(device: FeatureDevice, mm: Union[int, str]) -> None:
    """Set the lift-off distance in millimetres (1 or 2)."""
    distance = int(mm)
    if distance not in LIFT_OFF_DISTANCES:
        raise ValueError("lift-off distance must be 1 or 2")
    check_sleep(device)
    device.send_feature_report(_command((0x02, 0x01, 0x01, 0x07), (distance - 1,)))


def set_polling_rate(device: FeatureDevice, ms: Union[int, str]) -> None:
    """Set the polling interval in milliseconds (1, 2, 4 or 8)."""
    interval = int(ms)
    if interval not in POLLING_RATES:
        raise ValueError("polling rate must be one of 1, 2, 4, 8")
    check_sleep(device)
    device.send_feature_report(_command((0x02, 0x01, 0x01, 0x00), (interval,)))


def set_scroll(device: FeatureDevice, direction: ScrollDirection) -> None:
    """Set normal or inverted scrolling in every profile."""
    check_sleep(device)
    if direction is ScrollDirection.INVERT:
        up, down = MouseFn.SCROLL_DOWN, MouseFn.SCROLL_UP
    else:
        up, down = MouseFn.SCROLL_UP, MouseFn.SCROLL_DOWN
    for profile in PROFILES:
        set_binding(device, profile, Button.SCROLL_UP, up)
        set_binding(device, profile, Button.SCROLL_DOWN, down)


def set_sleep(device: FeatureDevice, minutes: int, seconds: Optional[int]) -> None:
    """Set the idle time before sleeping; zero disables sleeping."""
    check_sleep(device)
    total = _byte(minutes, "minutes") * 60 + _byte(seconds or 0, "seconds")
    value = total.to_bytes(2, "big") if total > 0 else b"\xff\xff"
    device.send_feature_report(_command((0x02, 0x02, 0x00, 0x07), value))