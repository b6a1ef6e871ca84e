"""Binding mouse buttons to keys and functions."""

from __future__ import annotations

import time
from typing import Optional

from gmousectl.hid import REPORT_SIZE, FeatureDevice
from gmousectl.model import (
    Binding,
    Button,
    DPIFn,
    KeyBinding,
    KeyboardFn,
    MediaFn,
    MouseFn,
    NoBinding,
)

DEFAULT_PROFILE = 1
BINDING_OFFSET = 10
REPLY_SIZE = 55
MAX_ATTEMPTS = 3

_BUTTON_IDS = {
    Button.LEFT: 1,
    Button.RIGHT: 2,
    Button.SCROLL: 3,
    Button.BACK: 4,
    Button.FORWARD: 5,
    Button.DPI_BTN: 20,
    Button.SCROLL_UP: 16,
    Button.SCROLL_DOWN: 17,
}

_MOUSE_IDS = {
    MouseFn.LEFT: 1,
    MouseFn.RIGHT: 2,
    MouseFn.SCROLL: 3,
    MouseFn.BACK: 4,
    MouseFn.FORWARD: 5,
    MouseFn.SCROLL_UP: 16,
    MouseFn.SCROLL_DOWN: 17,
    MouseFn.PROFILE_CYCLE_UP: 24,
    MouseFn.PROFILE_CYCLE_DOWN: 25,
    MouseFn.BATTERY_STATUS: 12,
}

# Functions whose id is encoded as (kind, argument) instead of (1, id).
_SPECIAL_MOUSE = {12: (12, 1), 24: (8, 4), 25: (8, 3)}

_KEYBOARD_IDS = {
    KeyboardFn.PROFILE_CYCLE_UP: 1,
    KeyboardFn.PROFILE_CYCLE_DOWN: 2,
    KeyboardFn.LAYER_CYCLE_UP: 3,
    KeyboardFn.LAYER_CYCLE_DOWN: 4,
}

_DPI_IDS = {
    DPIFn.STAGE_UP: 1,
    DPIFn.STAGE_DOWN: 2,
    DPIFn.CYCLE_UP: 6,
    DPIFn.CYCLE_DOWN: 7,
}

_MEDIA_CODES = {
    MediaFn.PLAYER: (1, 131),
    MediaFn.PLAY_PAUSE: (0, 205),
    MediaFn.NEXT: (0, 181),
    MediaFn.PREVIOUS: (0, 182),
    MediaFn.STOP: (0, 183),
    MediaFn.MUTE: (0, 226),
    MediaFn.VOLUME_UP: (0, 233),
    MediaFn.VOLUME_DOWN: (0, 234),
}

_MODIFIER_BITS = {"ControlLeft": 0x01, "ShiftRight": 0x02, "AltRight": 0x04, "MetaLeft": 0x08}


class BindingError(RuntimeError):
    """The device did not accept a binding."""


def button_id(button: Button) -> int:
    """The device's id for a mouse button."""
    return _BUTTON_IDS[button]


def _encode_key(binding: KeyBinding) -> bytes:
    modifier_bits = 0
    if binding.modifier is not None:
        modifier_bits = _MODIFIER_BITS.get(binding.modifier.code, 0)
    if binding.key.modifier is not None:
        return bytes((0x04, 0x02, modifier_bits | binding.key.modifier, 0x00))
    return bytes((0x04, 0x02, modifier_bits, binding.key.scan_code))


def _encode_mouse(mouse_fn: MouseFn) -> bytes:
    function_id = _MOUSE_IDS[mouse_fn]
    kind, argument = _SPECIAL_MOUSE.get(function_id, (0x01, function_id))
    return bytes((kind, 0x01, argument, 0x00))


def encode_binding(binding: Binding) -> bytes:
    """The four bytes that describe what a button does."""
    if isinstance(binding, KeyBinding):
        return _encode_key(binding)
    if isinstance(binding, MouseFn):
        return _encode_mouse(binding)
    if isinstance(binding, KeyboardFn):
        return bytes((0x05, 0x02, _KEYBOARD_IDS[binding], 0x0F))
    if isinstance(binding, DPIFn):
        return bytes((0x07, 0x01, _DPI_IDS[binding], 0x00))
    if isinstance(binding, MediaFn):
        return bytes((0x05, 0x02, *_MEDIA_CODES[binding]))
    if isinstance(binding, NoBinding):
        return bytes(4)
    raise TypeError(f"unsupported binding: {binding!r}")


def build_binding_report(profile: Optional[int], button: Button, binding: Binding) -> bytes:
    """The feature report that binds ``button`` in ``profile``."""
    report = bytearray(REPORT_SIZE)
    report[3:7] = bytes((0x02, 0x09, 0x03, 0x00))
    report[7] = DEFAULT_PROFILE if profile is None else profile
    report[8] = button_id(button)
    encoded = encode_binding(binding)
    report[BINDING_OFFSET:BINDING_OFFSET + len(encoded)] = encoded
    return bytes(report)


def set_binding(
    device: FeatureDevice, profile: Optional[int], button: Button, binding: Binding
) -> None:
    """Bind a button and wait until the device confirms it."""
    report = build_binding_report(profile, button, binding)
    device.send_feature_report(report)
    set_and_check(device, report, 0, False)


def set_and_check(device: FeatureDevice, report: bytes, depth: int, waiting: bool) -> None:
    """Poll the device after a binding, resending it while the device is busy."""
    while True:
        if depth >= MAX_ATTEMPTS:
            raise BindingError("failed to bind key")
        time.sleep(0.1)
        if waiting:
            depth += 1
            continue
        reply = device.get_feature_report(REPLY_SIZE)
        time.sleep(0.04)
        code = reply[0]
        if code == 0xA2:
            device.send_feature_report(report)
        elif code == 0xA4:
            waiting = True
        elif code != 0xA0:
            return
        depth += 1