# v4hal

A hardware abstraction layer for the V4 virtual machine. It gives one
interface to GPIO pins, UART ports, timers, console I/O and critical
sections, so a program written against it behaves the same way on any
platform object that supplies those operations.

Two platforms come with the package:

- `PosixPlatform` (in `v4hal.platform`), a simulated platform for an
  ordinary computer:
  - 32 GPIO pins whose modes and levels are kept in memory;
  - 4 UART ports, of which port 0 writes to standard output;
  - a console on standard output and standard input;
  - a monotonic clock for milliseconds (wrapping at 32 bits) and microseconds;
  - a lock for critical sections.
- `MockHal` (in `v4hal.mock`), an in-memory HAL for unit tests that records
  pin values and transmitted UART bytes, accepts injected receive data, and
  advances its clocks on delay instead of sleeping.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

`v4hal-blink` drives an LED pin on the simulated platform. It prints the
platform's GPIO and UART counts, then toggles the pin and prints each state
change with the current millisecond count:

```
v4hal-blink
v4hal-blink --pin 5 --times 4 --interval 250
```

| Option       | Default | Meaning                         |
|--------------|---------|---------------------------------|
| `--pin`      | 13      | GPIO pin number                 |
| `--times`    | 10      | number of toggles               |
| `--interval` | 1000    | delay between toggles in ms     |

It exits with status 1 if the pin cannot be configured, for example a pin
number outside 0–31.

The same loop is available as `v4hal.blink.blink(hal, pin, times,
interval_ms, out)`, which returns the list of levels it wrote.

## Modules

| Module           | What it provides                                                                            |
|------------------|---------------------------------------------------------------------------------------------|
| `v4hal.errors`   | `ErrorCode`, `HalError`, `strerror()` and `check()`                                         |
| `v4hal.types`    | `GpioMode`, `GpioValue`, `GpioIrqEdge`, `UartConfig`, `Capabilities`                        |
| `v4hal.platform` | `PosixPlatform` and its `UartHandle`                                                        |
| `v4hal.gpio`     | `Gpio`, pin operations with range checks; `GpioPin`, one configured pin                     |
| `v4hal.uart`     | `UartBus`, handle-based access; `Uart`, one open port usable as a context manager           |
| `v4hal.timer`    | `Timer`: `millis`, `micros`, `delay_ms`, `delay_us`, `elapsed_ms`, `elapsed_us`             |
| `v4hal.hal`      | `Hal`: lifecycle, capabilities, console I/O, critical sections; `CriticalSection`           |
| `v4hal.blink`    | `blink()` and the `main()` behind `v4hal-blink`                                             |
| `v4hal.mock`     | `MockHal`, `MockGpioMode` and `MockError`, for tests                                        |

## Errors

A failing operation raises `HalError`. The exception's `code` is the
negative `ErrorCode`, and its message is what `strerror()` gives for it.
`check()` returns a non-negative result unchanged and raises for a negative
one.

```python
from v4hal.errors import ErrorCode, HalError, check, strerror

strerror(ErrorCode.PARAM)   # "Invalid parameter"
strerror(ErrorCode.IO)      # "I/O error"
strerror(42)                # "Unknown error"

try:
    check(ErrorCode.TIMEOUT)
except HalError as err:
    print(err.code, err)    # -3 Operation timed out
```

## GPIO and UART

```python
import sys

from v4hal.gpio import Gpio, GpioPin
from v4hal.platform import PosixPlatform
from v4hal.types import GpioMode, GpioValue, UartConfig
from v4hal.uart import Uart, UartBus

platform = PosixPlatform(sys.stdout.buffer, sys.stdin.buffer)

led = GpioPin(Gpio(platform), 13, GpioMode.OUTPUT)
led.write(GpioValue.HIGH)
led.toggle()
led.read()                  # GpioValue.LOW

config = UartConfig(baudrate=115200, data_bits=8, stop_bits=1, parity=0)
with Uart(UartBus(platform), 0, config) as uart:
    uart.write(b"Hello")    # port 0 writes to standard output; returns 5
```

`Gpio` raises `HalError` with the invalid-parameter code for any pin number
outside the platform's range (0–31 on `PosixPlatform`). On `PosixPlatform`,
writing to a pin that is not configured as an output raises the same error.

`UartBus.open` raises `HalError` with the no-device code for a port outside
the platform's range (0–3 on `PosixPlatform`) or a missing configuration.
On `PosixPlatform`, writes to ports other than 0 go nowhere and return 0,
and using a closed handle raises the invalid-parameter error.

## The Hal object

`Hal` gathers one platform's services; it uses a `PosixPlatform` if none is
given. It exposes `gpio` (a `Gpio`), `uart` (a `UartBus`) and `platform`.
As a context manager it calls `init()` on entry and `deinit()` on exit; these
and `reset()` call the platform's `init`, `reset` and `deinit` hooks if it
has them and do nothing otherwise. `capabilities()` returns the platform's
`Capabilities`, or one with every count zero if the platform gives none.

```python
from v4hal.hal import Hal
from v4hal.timer import Timer

with Hal() as hal:
    hal.capabilities().gpio_count   # 32
    hal.console_write(b"ready\n")   # returns 6
    with hal.critical():
        ...                         # protected code
    timer = Timer(hal.platform)
    start = timer.millis()
    timer.delay_ms(10)
    timer.elapsed_ms(start)         # about 10, correct across a 32-bit wrap
```

On `PosixPlatform` a critical section is an ordinary lock: it is not
re-entrant, so entering it again from the same thread before leaving it
blocks forever.

## Testing with MockHal

```python
from v4hal.mock import MockError, MockGpioMode, MockHal

mock = MockHal()
mock.gpio_init(5, MockGpioMode.OUTPUT)
mock.gpio_write(5, 7)
mock.gpio_get_value(5)      # 1

mock.uart_init(0, 9600)
mock.uart_write(0, b"hi")
mock.uart_get_tx(0)         # b"hi"
mock.uart_inject_rx(0, b"ok")
mock.uart_read(0, 10)       # b"ok"

mock.delay_ms(5)
mock.millis(), mock.micros()    # (5, 5000)

try:
    mock.gpio_read(40)
except MockError as err:
    err.code                # MockError.OUT_OF_BOUNDS (-13)
```

UART buffers hold 256 bytes; writing past that raises `MockError` with the
busy code, and `uart_getc` on an empty receive buffer raises the timeout code.

## What this package does not do

- It does not drive real hardware. The only platforms are the simulated
  `PosixPlatform` and the in-memory `MockHal`; no board-specific platform is
  included.
- GPIO interrupts are not supported: `Gpio.irq_attach`, `irq_detach`,
  `irq_enable` and `irq_disable` always raise `HalError` with the
  not-supported code.
- On `PosixPlatform`, UART reads always return no data and `available()` is
  always 0; the UART configuration is accepted but not used.
- `Hal.console_read` blocks until standard input (or the stream given to
  `PosixPlatform`) supplies data.