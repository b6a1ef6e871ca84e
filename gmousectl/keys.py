"""Keyboard keys that can be bound to a mouse button."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gmousectl.ranges import _parse_unsigned


@dataclass(frozen=True)
class Key:
    """A key known by its HID scan code, JS key code and JS code name."""

    scan_code: int
    key_code: int
    code: str
    modifier: Optional[int] = None

    @property
    def is_modifier(self) -> bool:
        return self.modifier is not None


def _build_table() -> tuple[Key, ...]:
    letters = [
        Key(4 + offset, 65 + offset, f"Key{chr(ord('A') + offset)}")
        for offset in range(26)
    ]
    digits = [Key(30 + offset, 49 + offset, f"Digit{offset + 1}") for offset in range(9)]
    digits.append(Key(39, 48, "Digit0"))
    controls = [
        Key(40, 13, "Enter"),
        Key(41, 27, "Escape"),
        Key(42, 8, "Backspace"),
        Key(43, 9, "Tab"),
        Key(44, 32, "Space"),
        Key(45, 189, "Minus"),
        Key(46, 187, "Equal"),
        Key(47, 219, "BracketLeft"),
        Key(48, 221, "BracketRight"),
        Key(49, 220, "Backslash"),
        Key(51, 186, "Semicolon"),
        Key(52, 222, "Quote"),
        Key(53, 192, "Backquote"),
        Key(54, 188, "Comma"),
        Key(55, 190, "Period"),
        Key(56, 191, "Slash"),
        Key(57, 20, "CapsLock"),
    ]
    functions = [Key(58 + offset, 112 + offset, f"F{offset + 1}") for offset in range(12)]
    navigation = [
        Key(70, 44, "PrintScreen"),
        Key(71, 145, "ScrollLock"),
        Key(72, 19, "Pause"),
        Key(73, 45, "Insert"),
        Key(74, 36, "Home"),
        Key(75, 33, "PageUp"),
        Key(76, 46, "Delete"),
        Key(77, 35, "End"),
        Key(78, 34, "PageDown"),
        Key(79, 39, "ArrowRight"),
        Key(80, 37, "ArrowLeft"),
        Key(81, 40, "ArrowDown"),
        Key(82, 38, "ArrowUp"),
        Key(83, 144, "NumLock"),
        Key(84, 111, "NumpadDivide"),
        Key(85, 106, "NumpadMultiply"),
        Key(86, 109, "NumpadSubtract"),
        Key(87, 107, "NumpadAdd"),
        Key(99, 110, "NumpadDecimal"),
        Key(101, 93, "ContextMenu"),
    ]
    modifiers = [
        Key(224, 17, "ControlLeft", 1),
        Key(225, 16, "ShiftRight", 2),
        Key(226, 18, "AltRight", 4),
        Key(227, 91, "MetaLeft", 8),
        Key(231, 92, "MetaRight", 128),
    ]
    return tuple(letters + digits + controls + functions + navigation + modifiers)


KEYS: tuple[Key, ...] = _build_table()


def _find(attribute: str, value: object) -> Optional[Key]:
    return next((key for key in KEYS if getattr(key, attribute) == value), None)


def _by_number(text: str, attribute: str, label: str) -> Key:
    key = _find(attribute, _parse_unsigned(text, 0xFF))
    if key is None:
        raise ValueError(f"{label} '{text}' not supported")
    return key


def _require_modifier(key: Key, text: str, label: str) -> Key:
    if not key.is_modifier:
        raise ValueError(f"{label} '{text}' not a valid modifier")
    return key


def parse_scan_code(text: str) -> Key:
    """Look up a key by its decimal HID scan code."""
    return _by_number(text, "scan_code", "scan code")


def parse_key_code(text: str) -> Key:
    """Look up a key by its decimal JS key code."""
    return _by_number(text, "key_code", "key code")


def parse_code(text: str) -> Key:
    """Look up a key by its JS code name, e.g. ``KeyA``."""
    key = _find("code", text)
    if key is None:
        raise ValueError(f"code '{text}' not supported")
    return key


def parse_scan_code_mod(text: str) -> Key:
    """Look up a modifier key by its decimal HID scan code."""
    return _require_modifier(parse_scan_code(text), text, "scan code")


def parse_key_code_mod(text: str) -> Key:
    """Look up a modifier key by its decimal JS key code."""
    return _require_modifier(parse_key_code(text), text, "key code")


def parse_code_mod(text: str) -> Key:
    """Look up a modifier key by its JS code name."""
    key = _find("code", text)
    if key is None:
        raise ValueError(f"code '{text}' not supported!")
    return _require_modifier(key, text, "code")