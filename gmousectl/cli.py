"""Command line interface for configuring the mouse."""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Callable, Optional, Sequence

from gmousectl.bindings import BindingError, set_binding
from gmousectl.color import parse_hex
from gmousectl.hid import FeatureDevice, HidDevice, enumerate_devices, find_device
from gmousectl.keys import (
    parse_code,
    parse_code_mod,
    parse_key_code,
    parse_key_code_mod,
    parse_scan_code,
    parse_scan_code_mod,
)
from gmousectl.model import (
    Button,
    DPIFn,
    Effect,
    EffectKind,
    KeyBinding,
    KeyboardFn,
    MediaFn,
    MouseFn,
    NoBinding,
    ScrollDirection,
)
from gmousectl.ranges import _parse_unsigned, in_range
from gmousectl.report import battery_status, firmware_version
from gmousectl.settings import (
    LIFT_OFF_DISTANCES,
    POLLING_RATES,
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
from gmousectl.status import DeviceStatusError

Action = Callable[[FeatureDevice, bool], Optional[str]]

DEFAULT_STAGES = (400, 800, 1600, 3200)
DEFAULT_DPI_COLORS = ("FFFF00", "0000FF", "FF0000", "00FF00")

_EFFECT_HELP = {
    EffectKind.GLORIOUS: "name says it all",
    EffectKind.CYCLE: "cycle through all colors",
    EffectKind.PULSE: "pulse on/off through 2 to 6 colors",
    EffectKind.SOLID: "solid color",
    EffectKind.PULSE_ONE: "pulse on/off one color",
    EffectKind.TAIL: "glorious, but colors don't move",
    EffectKind.RAVE: "strobe-like effect with 1 or 2 colors",
    EffectKind.WAVE: "glorious, but more circus",
    EffectKind.OFF: "no effect, LED off",
}


def _checked(parse: Callable[[str], Any], name: str) -> Callable[[str], Any]:
    """Wrap a parser so its ValueError becomes an argparse error."""

    def convert(text: str) -> Any:
        try:
            return parse(text)
        except ValueError as error:
            raise argparse.ArgumentTypeError(str(error)) from None

    convert.__name__ = name
    return convert


_PROFILE = _checked(in_range(1, 3), "profile")
_RATE = _checked(in_range(0, 100), "rate")
_BYTE = _checked(lambda text: _parse_unsigned(text, 0xFF), "u8")
_COLOR = _checked(parse_hex, "color")


def _between(low: int, high: int) -> type[argparse.Action]:
    """An argparse action that requires between ``low`` and ``high`` values."""

    class _Between(argparse.Action):
        def __call__(self, parser, namespace, values, option_string=None):
            count = len(values)
            if not low <= count <= high:
                expected = f"{low}" if low == high else f"{low} to {high}"
                raise argparse.ArgumentError(self, f"expected {expected} values, got {count}")
            setattr(namespace, self.dest, list(values))

    return _Between


def _setter(func: Callable[..., None], *values: Any) -> Action:
    def run(device: FeatureDevice, wired: bool) -> Optional[str]:
        func(device, *values)
        return None

    return run


def _constant(binding: Any) -> Callable[[argparse.Namespace], Any]:
    return lambda args: binding


def _unsupported(name: str) -> Callable[[argparse.Namespace], Any]:
    def fail(args: argparse.Namespace) -> Any:
        raise ValueError(f"{name} bindings are not supported")

    return fail


def _effect(args: argparse.Namespace) -> Effect:
    return Effect(args.effect_kind, getattr(args, "rate", None), getattr(args, "colors", ()))


def _add_profile(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-p", "--profile", type=_PROFILE, help="profile id (1-3) [default: 1]")


def _leaf(subparsers: Any, name: str, help_text: str, build: Callable[..., Action]):
    parser = subparsers.add_parser(name, help=help_text, description=help_text)
    parser.set_defaults(build=build)
    return parser


def _version() -> str:
    try:
        return version("gmousectl")
    except PackageNotFoundError:
        return "unknown"


def _add_reports(kinds: Any) -> None:
    report = kinds.add_parser("report", help="retrieve information about the device")
    reports = report.add_subparsers(dest="report", required=True, metavar="REPORT")
    _leaf(reports, "battery", "battery percentage (if available)", lambda args: battery_status)
    _leaf(reports, "firmware", "device firmware version", lambda args: firmware_version)


def _add_led_effect(settings: Any) -> None:
    parser = _leaf(
        settings,
        "led-effect",
        "LED effect",
        lambda args: _setter(set_led_effect, args.profile, _effect(args)),
    )
    _add_profile(parser)
    effects = parser.add_subparsers(dest="effect", required=True, metavar="EFFECT")
    for kind in EffectKind:
        help_text = _EFFECT_HELP[kind]
        effect = effects.add_parser(kind.value, help=help_text, description=help_text)
        effect.set_defaults(effect_kind=kind)
        if kind.takes_rate:
            effect.add_argument("-r", "--rate", type=_RATE, help="effect rate, 0-100 [default: 40]")
        low, high = kind.color_count
        if high == 1:
            effect.add_argument("colors", metavar="COLOR", nargs=1, type=_COLOR, help="color in hex format")
        elif high > 1:
            effect.add_argument(
                "colors",
                metavar="COLOR",
                nargs="+",
                type=_COLOR,
                action=_between(low, high),
                help=f"{low} to {high} colors in hex format",
            )


def _add_key_bindings(bindings: Any) -> None:
    key = bindings.add_parser("key", help="single key")
    kinds = key.add_subparsers(dest="key_kind", required=True, metavar="KIND")
    for name, help_text, parse, parse_mod in (
        ("scan-code", "hardware scan code", parse_scan_code, parse_scan_code_mod),
        ("key-code", "JS-style KeyCode", parse_key_code, parse_key_code_mod),
        ("code", "JS-style Code", parse_code, parse_code_mod),
    ):
        leaf = kinds.add_parser(name, help=help_text, description=help_text)
        leaf.add_argument("key", type=_checked(parse, "key"))
        leaf.add_argument("-m", "--modifier", type=_checked(parse_mod, "modifier"), help="optional modifier")
        leaf.set_defaults(make_binding=lambda args: KeyBinding(args.key, args.modifier))


def _add_function_bindings(bindings: Any, name: str, help_text: str, functions: Any) -> None:
    parser = bindings.add_parser(name, help=help_text, description=help_text)
    choices = parser.add_subparsers(dest="function", required=True, metavar="FUNCTION")
    for function in functions:
        choices.add_parser(function.value).set_defaults(make_binding=_constant(function))


def _add_bind(settings: Any) -> None:
    parser = _leaf(
        settings,
        "bind",
        "key binding",
        lambda args: _setter(set_binding, args.profile, Button(args.button), args.make_binding(args)),
    )
    _add_profile(parser)
    parser.add_argument("button", choices=[button.value for button in Button], help="mouse button")
    bindings = parser.add_subparsers(dest="binding", required=True, metavar="BINDING")
    _add_key_bindings(bindings)
    _add_function_bindings(bindings, "keyboard", "keyboard function", KeyboardFn)
    _add_function_bindings(bindings, "mouse", "mouse function", MouseFn)
    _add_function_bindings(bindings, "dpi", "DPI modifier", DPIFn)
    bindings.add_parser("macro", help="macro (not supported)").set_defaults(
        make_binding=_unsupported("macro")
    )
    _add_function_bindings(bindings, "media", "multimedia", MediaFn)
    bindings.add_parser("shortcut", help="launch applications (not supported)").set_defaults(
        make_binding=_unsupported("shortcut")
    )
    bindings.add_parser("none", help="do nothing").set_defaults(make_binding=_constant(NoBinding()))


def _add_config(kinds: Any) -> None:
    config = kinds.add_parser("config", help="change the device's settings")
    settings = config.add_subparsers(dest="setting", required=True, metavar="SETTING")

    parser = _leaf(settings, "profile", "active profile by id", lambda args: _setter(set_profile, args.id))
    parser.add_argument("id", type=_PROFILE)

    _add_led_effect(settings)

    parser = _leaf(
        settings,
        "led-brightness",
        "LED brightness value[s] (0-255)",
        lambda args: _setter(set_led_brightness, args.wired, args.wireless),
    )
    parser.add_argument("wired", type=_BYTE)
    parser.add_argument("wireless", nargs="?", type=_BYTE, help="[default: <WIRED>]")

    parser = _leaf(
        settings,
        "sleep",
        "sleep delay in minutes [and seconds]",
        lambda args: _setter(set_sleep, args.minutes, args.seconds),
    )
    parser.add_argument("minutes", type=_BYTE)
    parser.add_argument("seconds", nargs="?", type=_BYTE, help="[default: 0]")

    parser = _leaf(
        settings,
        "dpi-stage",
        "active DPI stage by id",
        lambda args: _setter(set_dpi_stage, args.profile, args.id),
    )
    _add_profile(parser)
    parser.add_argument("id", type=_checked(in_range(1, 4), "stage"))

    parser = _leaf(
        settings,
        "dpi-stages",
        "set DPI stages (100-19000)",
        lambda args: _setter(set_dpi_stages, args.profile, args.stages),
    )
    _add_profile(parser)
    parser.add_argument(
        "stages",
        metavar="STAGE",
        nargs="*",
        type=_checked(in_range(100, 19000), "stage"),
        default=list(DEFAULT_STAGES),
        action=_between(4, 4),
    )

    parser = _leaf(
        settings,
        "dpi-colors",
        "set DPI stage colors",
        lambda args: _setter(set_dpi_colors, args.profile, args.colors),
    )
    _add_profile(parser)
    parser.add_argument(
        "colors",
        metavar="COLOR",
        nargs="*",
        type=_COLOR,
        default=[parse_hex(text) for text in DEFAULT_DPI_COLORS],
        action=_between(4, 4),
    )

    parser = _leaf(settings, "lift-off", "lift-off distance in mm", lambda args: _setter(set_lift_off, args.mm))
    parser.add_argument("mm", choices=[str(value) for value in LIFT_OFF_DISTANCES])

    parser = _leaf(
        settings, "polling-rate", "polling rate in ms", lambda args: _setter(set_polling_rate, args.ms)
    )
    parser.add_argument("ms", choices=[str(value) for value in POLLING_RATES])

    parser = _leaf(
        settings,
        "debounce",
        "debounce in ms (0-16)",
        lambda args: _setter(set_debounce, args.profile, args.ms),
    )
    _add_profile(parser)
    parser.add_argument("ms", type=_checked(in_range(0, 16), "ms"))

    _add_bind(settings)

    parser = _leaf(
        settings,
        "scroll",
        "scroll inversion",
        lambda args: _setter(set_scroll, ScrollDirection(args.direction)),
    )
    parser.add_argument("direction", choices=[direction.value for direction in ScrollDirection])


def build_parser() -> argparse.ArgumentParser:
    """The parser for every report and setting."""
    parser = argparse.ArgumentParser(prog="gmousectl", description="Configure Glorious mice.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    kinds = parser.add_subparsers(dest="kind", required=True, metavar="COMMAND")
    _add_reports(kinds)
    _add_config(kinds)
    return parser


def _action(args: argparse.Namespace) -> Action:
    """Turn parsed arguments into a function of (device, wired)."""
    return args.build(args)


def _fail(message: str) -> None:
    label = "\033[1;31merror\033[0m" if sys.stdout.isatty() else "error"
    print(f"{label}: {message}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the exit status."""
    args = build_parser().parse_args(argv)
    try:
        action = _action(args)
        info = find_device(enumerate_devices())
        with HidDevice(info.path) as device:
            output = action(device, info.wired)
    except (LookupError, ValueError, OSError, BindingError, DeviceStatusError) as error:
        _fail(str(error))
        return 1
    if output is not None:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())