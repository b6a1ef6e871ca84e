"""Querying whether the mouse is awake."""

from __future__ import annotations

import time
from enum import IntEnum

from gmousectl.hid import REPORT_SIZE, FeatureDevice

STATUS_QUERY = 0x83
_STATUS_BYTES = (0xA1, 0xA4, 0xA2, 0xA0, 0xA3)


class Status(IntEnum):
    """Device state as reported in byte 1 of the status reply."""

    AWAKE = 0
    ASLEEP = 1
    UNKNOWN = 2
    WAKING_UP = 3
    IDLE = 4


class DeviceStatusError(RuntimeError):
    """The device answered with a status byte that is not understood."""


def _status_request() -> bytes:
    request = bytearray(REPORT_SIZE)
    request[3] = 0x02
    request[4] = 0x02
    request[6] = STATUS_QUERY
    return bytes(request)


def read_status_report(device: FeatureDevice) -> bytes:
    """Ask the device for its status and return the raw reply."""
    device.send_feature_report(_status_request())
    time.sleep(0.05)
    return device.get_feature_report(REPORT_SIZE)


def get_status(device: FeatureDevice) -> Status:
    """Return the device's current status."""
    read_status_report(device)
    report = device.get_feature_report(REPORT_SIZE)
    try:
        status = Status(_STATUS_BYTES.index(report[1]))
    except ValueError:
        raise DeviceStatusError(f"unrecognised status byte 0x{report[1]:02X}") from None
    if report[6] != STATUS_QUERY:
        status = Status.UNKNOWN
    return status


def check_sleep(device: FeatureDevice) -> bool:
    """Warn if the device is asleep; return whether it is."""
    asleep = get_status(device) is Status.ASLEEP
    if asleep:
        print("Cannot write changes to device since it is off or sleeping.")
    return asleep