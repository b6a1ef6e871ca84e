from pathlib import Path

import pytest

from gmousectl.hid import DeviceInfo, HidDevice, enumerate_devices, find_device
from gmousectl.model import VENDOR_ID, Device


def _add_hidraw(root, name, vendor, product, interface=None, uevent=None):
    usb_interface = root / "devices" / f"usb-{name}"
    hid_dir = usb_interface / f"0003:{vendor:04X}:{product:04X}.0001"
    hid_dir.mkdir(parents=True)
    text = uevent if uevent is not None else f"DRIVER=hid-generic\nHID_ID=0003:{vendor:08X}:{product:08X}\n"
    (hid_dir / "uevent").write_text(text)
    if interface is not None:
        (usb_interface / "bInterfaceNumber").write_text(f"{interface:02x}\n")
    node = root / "class" / name
    node.mkdir(parents=True)
    (node / "device").symlink_to(hid_dir, target_is_directory=True)
    return root / "class"


def test_enumerate_reads_ids_and_interface(tmp_path):
    classes = _add_hidraw(tmp_path, "hidraw0", VENDOR_ID, Device.MODEL_O, interface=2)
    devices = list(enumerate_devices(classes))
    assert [(d.vendor_id, d.product_id, d.interface_number) for d in devices] == [
        (VENDOR_ID, Device.MODEL_O, 2)
    ]
    assert devices[0].path == Path("/dev/hidraw0")


def test_enumerate_without_interface_number(tmp_path):
    classes = _add_hidraw(tmp_path, "hidraw3", VENDOR_ID, Device.MODEL_D)
    (device,) = enumerate_devices(classes)
    assert device.interface_number == -1


def test_enumerate_skips_malformed_uevent(tmp_path):
    classes = _add_hidraw(tmp_path, "hidraw0", VENDOR_ID, Device.MODEL_D, 2, uevent="DRIVER=x\n")
    assert list(enumerate_devices(classes)) == []


def test_enumerate_missing_root(tmp_path):
    assert list(enumerate_devices(tmp_path / "absent")) == []


def test_find_device_prefers_lowest_product_id():
    wireless = DeviceInfo(Path("/dev/hidraw1"), VENDOR_ID, Device.WIRED_MODEL_O, 2)
    wired = DeviceInfo(Path("/dev/hidraw2"), VENDOR_ID, Device.MODEL_O, 2)
    foreign = DeviceInfo(Path("/dev/hidraw0"), 0x1234, 0x0001, 2)
    assert find_device([wireless, foreign, wired]) == wired


def test_find_device_requires_feature_interface():
    other = DeviceInfo(Path("/dev/hidraw1"), VENDOR_ID, Device.MODEL_O, 0)
    with pytest.raises(LookupError, match="no matching device found"):
        find_device([other])


def test_find_device_rejects_unsupported_product():
    unknown = DeviceInfo(Path("/dev/hidraw1"), VENDOR_ID, Device.MODEL_O - 1, 2)
    with pytest.raises(LookupError):
        find_device([unknown])


def test_wired_flag_follows_product_id():
    assert DeviceInfo(Path("/dev/a"), VENDOR_ID, Device.MODEL_O_MINUS).wired is True
    assert DeviceInfo(Path("/dev/a"), VENDOR_ID, Device.WIRED_MODEL_O).wired is False


def test_open_missing_node():
    with pytest.raises(FileNotFoundError):
        HidDevice("/nonexistent/hidraw99")


def test_feature_reports_fail_on_regular_file(tmp_path):
    node = tmp_path / "node"
    node.write_bytes(b"")
    with HidDevice(node) as device:
        with pytest.raises(OSError):
            device.send_feature_report(bytes(65))
        with pytest.raises(OSError):
            device.get_feature_report(65)


def test_closed_device_refuses_io(tmp_path):
    node = tmp_path / "node"
    node.write_bytes(b"")
    device = HidDevice(node)
    device.close()
    device.close()
    with pytest.raises(ValueError, match="closed"):
        device.send_feature_report(bytes(65))


def test_empty_report_rejected(tmp_path):
    node = tmp_path / "node"
    node.write_bytes(b"")
    with HidDevice(node) as device:
        with pytest.raises(ValueError):
            device.send_feature_report(b"")