# gmousectl

Configure and query Glorious Model O, Model D, Model O- and Model D- mice
(wired and wireless) from the command line, using HID feature reports sent
through the Linux hidraw interface.

The tool looks through `/sys/class/hidraw` for a supported mouse
(vendor id `0x258A`) and uses its feature-report interface (interface 2).
When several supported devices are present, the one with the lowest
product id is chosen; product ids up to `0x2013` are treated as the wired
connection.

## Installation

```
pip install .
```

The package has no dependencies beyond the Python standard library
(Python 3.10 or later). Read/write access to the mouse's `/dev/hidraw*`
node is needed; on Linux this usually means a udev rule granting your user
access, or running as root.

## Reports

```
gmousectl report battery     # battery percentage, or the sleep state
gmousectl report firmware    # firmware version, e.g. 1.0.5.0
```

`report battery` prints the percentage on its own for a wireless
connection, and adds `(charging)` or `(fully charged)` for a wired one.
When the mouse is asleep or waking up it prints `(asleep)` or
`(waking up)`; for any other state it prints the raw status bytes followed
by `(unknown status)`.

## Configuration

```
gmousectl config profile 2
gmousectl config led-effect --profile 1 solid FF8800
gmousectl config led-effect pulse --rate 60 FF0000 00FF00 0000FF
gmousectl config led-effect off
gmousectl config led-brightness 200 120
gmousectl config sleep 5 30
gmousectl config dpi-stage 2
gmousectl config dpi-stages 400 800 1600 3200
gmousectl config dpi-colors FFFF00 0000FF FF0000 00FF00
gmousectl config lift-off 2
gmousectl config polling-rate 1
gmousectl config debounce 4
gmousectl config scroll invert
```

- `profile ID`: active profile, 1–3.
- `led-effect [-p PROFILE] EFFECT`: effects are `glorious`, `cycle`,
  `pulse` (2–6 colours), `solid` (1 colour), `pulse-one` (1 colour),
  `tail`, `rave` (1–2 colours), `wave` and `off`. Every effect except
  `solid` and `off` takes `-r/--rate` from 0 to 100, default 40. Colours
  are six-digit hex values such as `00FF7F`.
- `led-brightness WIRED [WIRELESS]`: 0–255 each; the wireless value
  defaults to the wired one.
- `sleep MINUTES [SECONDS]`: idle time before sleeping; a total of zero
  disables sleeping.
- `dpi-stage [-p PROFILE] ID`: active DPI stage, 1–4.
- `dpi-stages [-p PROFILE] [STAGE ...]`: exactly four values from 100 to
  19000, default `400 800 1600 3200`.
- `dpi-colors [-p PROFILE] [COLOR ...]`: exactly four colours, default
  `FFFF00 0000FF FF0000 00FF00`.
- `lift-off MM`: 1 or 2.
- `polling-rate MS`: 1, 2, 4 or 8.
- `debounce [-p PROFILE] MS`: 0–16.
- `scroll default|invert`: sets the scroll-up and scroll-down buttons in
  all three profiles.

Profiles default to 1 wherever `-p/--profile` is accepted. Before most
settings are written the mouse's status is queried, and a warning is
printed if it is off or sleeping.

## Button bindings

```
gmousectl config bind forward key code KeyC --modifier ControlLeft
gmousectl config bind back key scan-code 41
gmousectl config bind dpi-btn dpi cycle-up
gmousectl config bind scroll media play-pause
gmousectl config bind right mouse left
gmousectl config bind back keyboard profile-cycle-up
gmousectl config bind forward none
```

Buttons: `left`, `right`, `scroll`, `forward`, `back`, `dpi-btn`,
`scroll-up`, `scroll-down`.

Bindings:

- `key scan-code|key-code|code KEY [-m MODIFIER]`: a key given as a
  hardware scan code, a JavaScript-style key code or a JavaScript-style
  `code` name (`KeyA`, `Digit1`, `F5`, `ArrowUp`, ...). The modifier must
  be one of the modifier keys (`ControlLeft`, `ShiftRight`, `AltRight`,
  `MetaLeft`, `MetaRight`).
- `keyboard`: `profile-cycle-up`, `profile-cycle-down`, `layer-cycle-up`,
  `layer-cycle-down`.
- `mouse`: `left`, `right`, `scroll`, `forward`, `back`, `scroll-up`,
  `scroll-down`, `profile-cycle-up`, `profile-cycle-down`,
  `battery-status`.
- `dpi`: `stage-up`, `stage-down`, `cycle-up`, `cycle-down`.
- `media`: `player`, `play-pause`, `next`, `previous`, `stop`, `mute`,
  `volume-up`, `volume-down`.
- `none`: the button does nothing.

After a binding is sent the mouse is polled and the binding resent while
it reports being busy; if it is not accepted after three attempts the
command fails with `failed to bind key`.

Run `gmousectl --help` or `gmousectl config <setting> --help` for all
options, and `gmousectl --version` for the installed version.

## Errors

Invalid arguments are rejected by the argument parser. Problems at run
time — no supported mouse found, an unreadable device node, an unrecognised
status reply, a failed binding — are printed as `error: <message>` and the
command exits with status 1.

## Using it from Python

The pieces behind the command are importable, for example:

```python
from gmousectl.hid import HidDevice, enumerate_devices, find_device
from gmousectl.color import parse_hex
from gmousectl.model import Effect, EffectKind
from gmousectl.settings import set_led_effect
from gmousectl.report import battery_status

info = find_device(enumerate_devices())
with HidDevice(info.path) as device:
    set_led_effect(device, 1, Effect(EffectKind.SOLID, colors=[parse_hex("FF8800")]))
    print(battery_status(device, info.wired))
```

`gmousectl.bindings.build_binding_report` and `encode_binding` build the
binding reports without touching a device.

## Limitations

- Only Linux is supported: devices are found through `/sys/class/hidraw`
  and reports are exchanged with hidraw ioctls.
- `macro` and `shortcut` bindings are listed by the command but not
  supported; choosing them ends with an error.
- Settings can be written but not read back; only the battery state and
  the firmware version can be queried.