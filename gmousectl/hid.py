"""Finding supported mice and exchanging feature reports through hidraw."""

from __future__ import annotations

import fcntl
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Protocol, Union

from gmousectl.model import FEATURE_INTERFACE, VENDOR_ID, is_supported_product, is_wired

REPORT_SIZE = 65
DEFAULT_SYSFS_ROOT = Path("/sys/class/hidraw")
DEV_ROOT = Path("/dev")

_IOC_WRITE = 1
_IOC_READ = 2


def _ioc(direction: int, kind: str, number: int, size: int) -> int:
    return (direction << 30) | (size << 16) | (ord(kind) << 8) | number


def _set_feature_request(size: int) -> int:
    return _ioc(_IOC_WRITE | _IOC_READ, "H", 0x06, size)


def _get_feature_request(size: int) -> int:
    return _ioc(_IOC_WRITE | _IOC_READ, "H", 0x07, size)


class FeatureDevice(Protocol):
    """Anything that exchanges HID feature reports."""

    def send_feature_report(self, data: bytes) -> None: ...

    def get_feature_report(self, size: int) -> bytes: ...


@dataclass(frozen=True)
class DeviceInfo:
    """A hidraw node and the USB identity behind it."""

    path: Path
    vendor_id: int
    product_id: int
    interface_number: int = -1

    @property
    def wired(self) -> bool:
        return is_wired(self.product_id)


def _parse_hid_id(uevent: str) -> Optional[tuple[int, int]]:
    for line in uevent.splitlines():
        key, _, value = line.partition("=")
        if key.strip() != "HID_ID":
            continue
        parts = value.strip().split(":")
        if len(parts) != 3:
            return None
        try:
            return int(parts[1], 16), int(parts[2], 16)
        except ValueError:
            return None
    return None


def _interface_number(usb_interface: Path) -> int:
    try:
        return int((usb_interface / "bInterfaceNumber").read_text().strip(), 16)
    except (OSError, ValueError):
        return -1


def _read_device(entry: Path) -> Optional[DeviceInfo]:
    device_dir = (entry / "device").resolve()
    try:
        uevent = (device_dir / "uevent").read_text()
    except OSError:
        return None
    ids = _parse_hid_id(uevent)
    if ids is None:
        return None
    vendor_id, product_id = ids
    return DeviceInfo(
        path=DEV_ROOT / entry.name,
        vendor_id=vendor_id,
        product_id=product_id,
        interface_number=_interface_number(device_dir.parent),
    )


def enumerate_devices(sysfs_root: Union[str, Path] = DEFAULT_SYSFS_ROOT) -> Iterator[DeviceInfo]:
    """Yield every hidraw device described under ``sysfs_root``."""
    root = Path(sysfs_root)
    if not root.is_dir():
        return
    for entry in sorted(root.iterdir()):
        info = _read_device(entry)
        if info is not None:
            yield info


def find_device(devices: Iterable[DeviceInfo]) -> DeviceInfo:
    """Pick the supported mouse's feature interface, preferring the wired one."""
    candidates = [
        device
        for device in devices
        if device.vendor_id == VENDOR_ID
        and is_supported_product(device.product_id)
        and device.interface_number == FEATURE_INTERFACE
    ]
    if not candidates:
        raise LookupError("no matching device found")
    return min(candidates, key=lambda device: device.product_id)


class HidDevice:
    """An open hidraw node."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._fd: Optional[int] = os.open(self.path, os.O_RDWR)

    def _require_open(self) -> int:
        if self._fd is None:
            raise ValueError("device is closed")
        return self._fd

    def send_feature_report(self, data: bytes) -> None:
        """Send a feature report whose first byte is the report id."""
        payload = bytes(data)
        if not payload:
            raise ValueError("feature report must not be empty")
        fcntl.ioctl(self._require_open(), _set_feature_request(len(payload)), payload)

    def get_feature_report(self, size: int = REPORT_SIZE) -> bytes:
        """Read a feature report of ``size`` bytes, report id 0."""
        if size < 1:
            raise ValueError("feature report size must be positive")
        fd = self._require_open()
        buffer = bytearray(size)
        fcntl.ioctl(fd, _get_feature_request(size), buffer, True)
        return bytes(buffer)

    def close(self) -> None:
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None

    def __enter__(self) -> "HidDevice":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()