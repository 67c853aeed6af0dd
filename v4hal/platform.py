"""Host platform: simulated GPIO, stream-backed UART and console, monotonic timer."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from typing import BinaryIO, Optional

from .errors import ErrorCode, HalError
from .types import Capabilities, GpioMode, GpioValue, UartConfig

__all__ = ["UartHandle", "PosixPlatform"]

_U32_MASK = 0xFFFFFFFF


@dataclass
class UartHandle:
    """An open simulated UART port; ``stream`` is where written bytes go, if anywhere."""

    port: int
    stream: Optional[BinaryIO] = None
    closed: bool = False


class PosixPlatform:
    """Platform backend for a general-purpose host.

    GPIO is simulated with bitmaps, UART port 0 writes to standard output,
    the console uses the standard streams and timing uses a monotonic clock.
    """

    max_gpio_pins = 32
    max_uart_ports = 4

    def __init__(self, stdout: Optional[BinaryIO] = None, stdin: Optional[BinaryIO] = None) -> None:
        self._stdout = stdout if stdout is not None else sys.stdout.buffer
        self._stdin = stdin if stdin is not None else sys.stdin.buffer
        self._gpio_states = 0
        self._gpio_modes = 0
        self._start_ns = time.monotonic_ns()
        self._critical = threading.Lock()

    # GPIO

    def gpio_mode(self, pin: int, mode: GpioMode) -> None:
        """Record the pin as output or input."""
        bit = 1 << pin
        if GpioMode(mode).is_output():
            self._gpio_modes |= bit
        else:
            self._gpio_modes &= ~bit

    def gpio_write(self, pin: int, value: GpioValue) -> None:
        """Set the simulated level of an output pin."""
        bit = 1 << pin
        if not self._gpio_modes & bit:
            raise HalError(ErrorCode.PARAM)
        if value == GpioValue.HIGH:
            self._gpio_states |= bit
        else:
            self._gpio_states &= ~bit

    def gpio_read(self, pin: int) -> GpioValue:
        """Return the simulated level of a pin."""
        return GpioValue.HIGH if self._gpio_states & (1 << pin) else GpioValue.LOW

    # UART

    def uart_open(self, port: int, config: UartConfig) -> UartHandle:
        """Open a simulated port; port 0 is connected to standard output."""
        return UartHandle(port, self._stdout if port == 0 else None)

    def uart_close(self, handle: UartHandle) -> None:
        handle.closed = True
        handle.stream = None

    def uart_write(self, handle: UartHandle, data: bytes) -> int:
        """Write bytes; returns how many reached the port's stream."""
        self._require_open(handle)
        if handle.stream is None:
            return 0
        written = handle.stream.write(bytes(data))
        handle.stream.flush()
        return len(data) if written is None else written

    def uart_read(self, handle: UartHandle, size: int) -> bytes:
        """Non-blocking read; the simulation never has received data."""
        self._require_open(handle)
        return b""

    def uart_available(self, handle: UartHandle) -> int:
        self._require_open(handle)
        return 0

    @staticmethod
    def _require_open(handle: UartHandle) -> None:
        if handle.closed:
            raise HalError(ErrorCode.PARAM)

    # Timer

    def _elapsed_ns(self) -> int:
        return time.monotonic_ns() - self._start_ns

    def millis(self) -> int:
        """Milliseconds since start, wrapping at 32 bits."""
        return (self._elapsed_ns() // 1_000_000) & _U32_MASK

    def micros(self) -> int:
        """Microseconds since start."""
        return self._elapsed_ns() // 1000

    def delay_ms(self, ms: int) -> None:
        time.sleep(ms / 1000)

    def delay_us(self, us: int) -> None:
        time.sleep(us / 1_000_000)

    # Console

    def console_write(self, data: bytes) -> int:
        """Write bytes to standard output; returns the count written."""
        try:
            written = self._stdout.write(bytes(data))
            self._stdout.flush()
        except OSError as exc:
            raise HalError(ErrorCode.IO) from exc
        return len(data) if written is None else written

    def console_read(self, size: int) -> bytes:
        """Read up to ``size`` bytes from standard input, blocking for the first."""
        reader = getattr(self._stdin, "read1", self._stdin.read)
        try:
            return reader(size)
        except OSError as exc:
            raise HalError(ErrorCode.IO) from exc

    # Critical sections

    def critical_enter(self) -> None:
        self._critical.acquire()

    def critical_exit(self) -> None:
        self._critical.release()

    # Capabilities

    def capabilities(self) -> Capabilities:
        return Capabilities(gpio_count=self.max_gpio_pins, uart_count=self.max_uart_ports)