"""Reading information back from the mouse."""

from __future__ import annotations

import time

from gmousectl.hid import REPORT_SIZE, FeatureDevice
from gmousectl.status import Status, get_status, read_status_report

FIRMWARE_QUERY = 0x81
FULL_CHARGE = 100


def battery_status(device: FeatureDevice, wired: bool) -> str:
    """Describe the battery level, or why it cannot be read."""
    status = get_status(device)
    report = read_status_report(device)
    percentage = report[8] or 1

    if status is Status.AWAKE:
        if not wired:
            return f"{percentage}%"
        state = "fully charged" if percentage >= FULL_CHARGE else "charging"
        return f"{percentage}% ({state})"
    if status is Status.ASLEEP:
        return "(asleep)"
    if status is Status.WAKING_UP:
        return "(waking up)"
    return f"[1:{report[1]:02X}, 6:{report[6]:02X}, 8:{report[8]:02X}] (unknown status)"


def firmware_version(device: FeatureDevice, wired: bool) -> str:
    """Return the firmware version as four dot-separated numbers."""
    request = bytearray(REPORT_SIZE)
    if wired:
        request[3] = 0x02
    request[4] = 0x03
    request[6] = FIRMWARE_QUERY

    device.send_feature_report(bytes(request))
    time.sleep(0.05)
    reply = device.get_feature_report(REPORT_SIZE)
    return ".".join(str(part) for part in reply[7:11])