import time

import pytest

from gmousectl.bindings import DEFAULT_PROFILE, build_binding_report
from gmousectl.color import parse_hex
from gmousectl.hid import REPORT_SIZE
from gmousectl.model import Button, Effect, EffectKind, MouseFn, ScrollDirection
from gmousectl.settings import (
    rate_value,
    set_debounce,
    set_dpi_colors,
    set_dpi_stage,
    set_dpi_stages,
    set_led_brightness,
    set_led_effect,
    set_lift_off,
    set_polling_rate,
    set_profile,
    set_scroll,
    set_sleep,
)
from gmousectl.status import STATUS_QUERY


class AwakeDevice:
    def __init__(self):
        self.sent = []

    def send_feature_report(self, data):
        self.sent.append(bytes(data))

    def get_feature_report(self, size):
        reply = bytearray(size)
        reply[1] = 0xA1
        reply[6] = STATUS_QUERY
        return bytes(reply)

    @property
    def commands(self):
        return [report for report in self.sent if report[6] != STATUS_QUERY]


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda seconds: None)


@pytest.fixture
def device():
    return AwakeDevice()


def test_rate_default_and_bounds():
    for kind in (EffectKind.GLORIOUS, EffectKind.WAVE):
        assert rate_value(None, kind) == rate_value(40, kind)
        assert rate_value(0, kind) > rate_value(100, kind)
    with pytest.raises(ValueError, match="0-100"):
        rate_value(101, EffectKind.CYCLE)
    with pytest.raises(ValueError):
        rate_value(-1, EffectKind.CYCLE)


def test_rave_and_wave_use_finer_scale():
    assert rate_value(50, EffectKind.RAVE) == rate_value(50, EffectKind.WAVE)
    assert rate_value(50, EffectKind.RAVE) > rate_value(50, EffectKind.PULSE)


def test_profile_checks_status_first(device):
    set_profile(device, 3)
    assert device.sent[0][6] == STATUS_QUERY
    (command,) = device.commands
    assert len(command) == REPORT_SIZE
    assert command[7] == 3


def test_debounce_default_profile(device):
    set_debounce(device, None, 12)
    (command,) = device.commands
    assert (command[7], command[8]) == (DEFAULT_PROFILE, 12)


def test_dpi_colors_round_trip(device):
    colors = [parse_hex(text) for text in ("FFFF00", "0000FF", "FF0000", "00FF00")]
    set_dpi_colors(device, 2, colors)
    (command,) = device.commands
    assert command[7] == 2
    decoded = [bytes(command[8 + 3 * n:11 + 3 * n]) for n in range(len(colors))]
    assert decoded == [bytes(color) for color in colors]


def test_dpi_stage(device):
    set_dpi_stage(device, 1, 4)
    (command,) = device.commands
    assert (command[7], command[8]) == (1, 4)


def test_dpi_stages_round_trip(device):
    stages = [400, 800, 1600, 3200]
    set_dpi_stages(device, None, stages)
    assert len(device.sent) == 1
    command = device.sent[0]
    assert command[8] == len(stages)
    pairs = [command[9 + 4 * n:13 + 4 * n] for n in range(len(stages))]
    assert [int.from_bytes(pair[:2], "big") for pair in pairs] == stages
    assert all(pair[:2] == pair[2:] for pair in pairs)


def test_led_brightness_two_reports(device):
    set_led_brightness(device, 200, None)
    first, second = device.commands
    assert (first[7], first[8]) == (1, 200)
    assert (second[7], second[8]) == (0, 200)
    assert first[3:7] == second[3:7]


def test_led_brightness_separate_wireless(device):
    set_led_brightness(device, 200, 50)
    assert device.commands[1][8] == 50


def test_solid_effect(device):
    color = parse_hex("12AB34")
    set_led_effect(device, None, Effect(EffectKind.SOLID, colors=[color]))
    (command,) = device.commands
    assert command[12:15] == bytes(color)
    assert command[11] == 0
    assert command[7] == DEFAULT_PROFILE


def test_pulse_length_grows_with_colors(device):
    colors = [parse_hex(text) for text in ("FF0000", "00FF00", "0000FF")]
    set_led_effect(device, 1, Effect(EffectKind.PULSE, colors=colors[:2]))
    set_led_effect(device, 1, Effect(EffectKind.PULSE, colors=colors))
    two, three = device.commands
    assert three[4] - two[4] == 3
    assert three[12:21] == b"".join(bytes(color) for color in colors)


def test_effect_rate_written(device):
    set_led_effect(device, 2, Effect(EffectKind.WAVE, rate=20))
    (command,) = device.commands
    assert command[11] == rate_value(20, EffectKind.WAVE)


def test_cycle_trailer_and_off(device):
    set_led_effect(device, 1, Effect(EffectKind.CYCLE))
    set_led_effect(device, 1, Effect(EffectKind.OFF))
    cycle, off = device.commands
    assert cycle[12] == 0xFF
    assert cycle[4] == off[4]
    assert (off[9], off[11]) == (0, 0)


def test_lift_off(device):
    set_lift_off(device, "1")
    set_lift_off(device, 2)
    assert [command[7] for command in device.commands] == [0, 1]
    with pytest.raises(ValueError):
        set_lift_off(device, 3)


def test_polling_rate(device):
    set_polling_rate(device, "8")
    assert device.commands[0][7] == 8
    with pytest.raises(ValueError):
        set_polling_rate(device, 3)


def test_sleep_seconds(device):
    set_sleep(device, 2, None)
    set_sleep(device, 0, 120)
    minutes, seconds = device.commands
    assert minutes[7:9] == seconds[7:9]


def test_sleep_zero_disables(device):
    set_sleep(device, 0, 0)
    assert device.commands[0][7:9] == b"\xff\xff"
    with pytest.raises(ValueError):
        set_sleep(device, 256, None)


@pytest.mark.parametrize(
    "direction, up, down",
    [
        (ScrollDirection.DEFAULT, MouseFn.SCROLL_UP, MouseFn.SCROLL_DOWN),
        (ScrollDirection.INVERT, MouseFn.SCROLL_DOWN, MouseFn.SCROLL_UP),
    ],
)
def test_scroll_binds_every_profile(device, direction, up, down):
    set_scroll(device, direction)
    expected = []
    for profile in (1, 2, 3):
        expected.append(build_binding_report(profile, Button.SCROLL_UP, up))
        expected.append(build_binding_report(profile, Button.SCROLL_DOWN, down))
    assert device.commands == expected