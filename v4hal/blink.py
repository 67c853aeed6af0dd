"""LED blink demonstration: toggles one output pin at a fixed interval."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, TextIO

from .errors import HalError
from .gpio import GpioPin
from .hal import Hal
from .timer import Timer
from .types import GpioMode, GpioValue

__all__ = ["blink", "main", "LED_PIN", "BLINK_INTERVAL_MS", "BLINK_COUNT"]

LED_PIN = 13
BLINK_INTERVAL_MS = 1000
BLINK_COUNT = 10


def blink(
    hal: Hal,
    pin: int = LED_PIN,
    times: int = BLINK_COUNT,
    interval_ms: int = BLINK_INTERVAL_MS,
    out: Optional[TextIO] = None,
) -> List[GpioValue]:
    """Configure ``pin`` as output and toggle it ``times`` times.

    Raises HalError if the pin cannot be configured. A failed write is
    reported on ``out`` and stops the loop. Returns the levels written.
    """
    out = out if out is not None else sys.stdout
    timer = Timer(hal.platform)
    led = GpioPin(hal.gpio, pin, GpioMode.OUTPUT)

    print(f"Blinking LED on pin {pin}...", file=out)
    print("Press Ctrl+C to exit\n", file=out)

    levels: List[GpioValue] = []
    state = GpioValue.LOW
    for _ in range(times):
        state = state.inverted()
        try:
            led.write(state)
        except HalError as exc:
            print(f"Error: Failed to write GPIO pin {pin} (error {exc.code})", file=out)
            break
        levels.append(state)
        label = "ON " if state is GpioValue.HIGH else "OFF"
        print(f"[{timer.millis()} ms] LED {label}", file=out)
        timer.delay_ms(interval_ms)
    return levels


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="v4hal-blink", description="Blink an LED pin.")
    parser.add_argument("--pin", type=int, default=LED_PIN, help="GPIO pin number")
    parser.add_argument("--times", type=int, default=BLINK_COUNT, help="number of toggles")
    parser.add_argument(
        "--interval", type=int, default=BLINK_INTERVAL_MS, help="delay between toggles in ms"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the blink demonstration on the host platform; returns an exit status."""
    args = _parse_args(argv)
    out = sys.stdout

    print("V4-hal Blink Example", file=out)
    print("====================\n", file=out)

    hal = Hal()
    try:
        hal.init()
    except HalError as exc:
        print(f"Error: Failed to initialize HAL (error {exc.code})", file=out)
        return 1

    caps = hal.capabilities()
    print("Platform capabilities:", file=out)
    print(f"  GPIO pins: {caps.gpio_count}", file=out)
    print(f"  UART ports: {caps.uart_count}", file=out)
    print(file=out)

    try:
        blink(hal, args.pin, args.times, args.interval, out)
    except HalError as exc:
        print(f"Error: Failed to configure GPIO pin {args.pin} (error {exc.code})", file=out)
        return 1

    print("\nBlink complete!", file=out)
    hal.deinit()
    return 0


if __name__ == "__main__":
    sys.exit(main())