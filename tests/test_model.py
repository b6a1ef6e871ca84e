import pytest

from gmousectl.color import parse_hex
from gmousectl.keys import parse_code
from gmousectl.model import (
    VENDOR_ID,
    Button,
    Device,
    DPIFn,
    Effect,
    EffectKind,
    KeyBinding,
    KeyboardFn,
    MediaFn,
    MouseFn,
    NoBinding,
    ScrollDirection,
    is_supported_product,
    is_wired,
)


def test_device_ids():
    assert Device(0x2011) is Device.MODEL_O
    assert Device(0x2024) is Device.WIRED_MODEL_O_MINUS
    assert is_supported_product(0x2011) is True
    assert is_wired(0x2011) is True
    assert is_wired(0x2024) is False
    assert VENDOR_ID == 0x258A


@pytest.mark.parametrize("device", list(Device))
def test_every_device_supported(device):
    assert is_supported_product(int(device)) is True


@pytest.mark.parametrize("product_id", [0x2010, 0x2014, 0x2026, VENDOR_ID])
def test_other_products_unsupported(product_id):
    assert is_supported_product(product_id) is False


def test_wired_split():
    assert [device for device in Device if is_wired(device)] == [
        Device.MODEL_O,
        Device.MODEL_D,
        Device.MODEL_O_MINUS,
    ]


def test_enum_command_names():
    assert Button("dpi-btn") is Button.DPI_BTN
    assert ScrollDirection("invert") is ScrollDirection.INVERT
    assert MouseFn("battery-status") is MouseFn.BATTERY_STATUS
    assert KeyboardFn("layer-cycle-down") is KeyboardFn.LAYER_CYCLE_DOWN
    assert DPIFn("cycle-up") is DPIFn.CYCLE_UP
    assert MediaFn("play-pause") is MediaFn.PLAY_PAUSE
    assert EffectKind("pulse-one") is EffectKind.PULSE_ONE


def test_enum_sizes():
    buttons = {
        Button(name)
        for name in (
            "left", "right", "scroll", "forward", "back",
            "dpi-btn", "scroll-up", "scroll-down",
        )
    }
    assert len(buttons) == 8
    assert buttons == set(Button)

    mouse_fns = {
        MouseFn(name)
        for name in (
            "left", "right", "scroll", "forward", "back", "scroll-up",
            "scroll-down", "profile-cycle-up", "profile-cycle-down", "battery-status",
        )
    }
    assert len(mouse_fns) == 10
    assert mouse_fns == set(MouseFn)

    media_fns = {
        MediaFn(name)
        for name in (
            "player", "play-pause", "next", "previous",
            "stop", "mute", "volume-up", "volume-down",
        )
    }
    assert len(media_fns) == 8
    assert media_fns == set(MediaFn)

    kinds = {
        EffectKind(name)
        for name in (
            "glorious", "cycle", "pulse", "solid", "pulse-one",
            "tail", "rave", "wave", "off",
        )
    }
    assert len(kinds) == 9
    assert kinds == set(EffectKind)


def test_effect_colors_become_tuple():
    colors = [parse_hex("FFFF00"), parse_hex("0000FF")]
    effect = Effect(EffectKind.PULSE, rate=40, colors=colors)
    assert effect.colors == tuple(colors)
    assert effect.rate == 40


def test_effect_equality():
    color = parse_hex("FF0000")
    assert Effect(EffectKind.SOLID, colors=[color]) == Effect(EffectKind.SOLID, colors=(color,))


@pytest.mark.parametrize("rate", [-1, 101])
def test_rate_out_of_range(rate):
    with pytest.raises(ValueError, match="rate must be in the range of 0-100"):
        Effect(EffectKind.WAVE, rate=rate)


@pytest.mark.parametrize("kind", [EffectKind.SOLID, EffectKind.OFF])
def test_rate_not_taken(kind):
    colors = [parse_hex("FF0000")] if kind is EffectKind.SOLID else []
    with pytest.raises(ValueError, match="takes no rate"):
        Effect(kind, rate=10, colors=colors)


@pytest.mark.parametrize(
    "kind, count",
    [
        (EffectKind.PULSE, 1),
        (EffectKind.PULSE, 7),
        (EffectKind.RAVE, 0),
        (EffectKind.RAVE, 3),
        (EffectKind.SOLID, 0),
        (EffectKind.PULSE_ONE, 2),
        (EffectKind.GLORIOUS, 1),
    ],
)
def test_wrong_color_count(kind, count):
    with pytest.raises(ValueError, match="takes"):
        Effect(kind, colors=[parse_hex("00FF00")] * count)


@pytest.mark.parametrize("kind", list(EffectKind))
def test_color_bounds_accepted(kind):
    low, high = kind.color_count
    for count in (low, high):
        effect = Effect(kind, colors=[parse_hex("00FF00")] * count)
        assert len(effect.colors) == count


def test_key_binding_modifier_checked():
    binding = KeyBinding(parse_code("KeyA"), parse_code("ControlLeft"))
    assert binding.modifier.modifier == 1
    with pytest.raises(ValueError, match="not a valid modifier"):
        KeyBinding(parse_code("KeyA"), parse_code("KeyB"))


def test_no_binding_equal():
    first = NoBinding()
    second = NoBinding()
    assert first == second
    assert (first == KeyBinding(parse_code("KeyA"), None)) is False