"""In-memory HAL that records GPIO, UART and timer activity for tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Union

__all__ = ["MockGpioMode", "MockError", "MockHal"]

MAX_GPIO_PINS = 32
MAX_UART_PORTS = 4
UART_BUFFER_SIZE = 256

_U32_MASK = 0xFFFFFFFF
_U64_MASK = 0xFFFFFFFFFFFFFFFF


class MockGpioMode(IntEnum):
    """Pin modes understood by the mock."""

    INPUT = 0
    OUTPUT = 1
    INPUT_PULLUP = 2
    INPUT_PULLDOWN = 3


class MockError(Exception):
    """Raised by the mock with the error code its operation reports."""

    INVALID_ARG = -1
    NOT_INITIALIZED = -2
    TIMEOUT = -3
    BUSY = -4
    OUT_OF_BOUNDS = -13

    _NAMES = {
        INVALID_ARG: "Invalid argument",
        NOT_INITIALIZED: "Not initialized",
        TIMEOUT: "Timeout",
        BUSY: "Busy",
        OUT_OF_BOUNDS: "Out of bounds",
    }

    def __init__(self, code: int) -> None:
        super().__init__(self._NAMES.get(code, "Unknown error"))
        self.code = code


@dataclass
class _GpioState:
    initialized: bool = False
    mode: MockGpioMode = MockGpioMode.INPUT
    value: int = 0


@dataclass
class _UartState:
    initialized: bool = False
    baudrate: int = 0
    tx: bytearray = field(default_factory=bytearray)
    rx: bytes = b""
    rx_pos: int = 0


def _to_byte(c: Union[int, bytes, str]) -> int:
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, str):
        c = c.encode("latin-1")
    if len(c) != 1:
        raise MockError(MockError.INVALID_ARG)
    return c[0]


class MockHal:
    """Simulated pins, UART buffers and clocks that tests can drive and inspect."""

    def __init__(self) -> None:
        self.reset()

    # Control and inspection

    def reset(self) -> None:
        """Clear all pins, UART buffers and counters."""
        self._gpio: List[_GpioState] = [_GpioState() for _ in range(MAX_GPIO_PINS)]
        self._uart: List[_UartState] = [_UartState() for _ in range(MAX_UART_PORTS)]
        self._millis = 0
        self._micros = 0

    def set_millis(self, ms: int) -> None:
        self._millis = ms & _U32_MASK

    def set_micros(self, us: int) -> None:
        self._micros = us & _U64_MASK

    def uart_inject_rx(self, port: int, data: bytes) -> None:
        """Replace a port's receive buffer; extra bytes beyond the buffer size are dropped."""
        if not 0 <= port < MAX_UART_PORTS:
            return
        state = self._uart[port]
        state.rx = bytes(data)[:UART_BUFFER_SIZE]
        state.rx_pos = 0

    def uart_get_tx(self, port: int) -> Optional[bytes]:
        """Bytes transmitted on ``port``, or None for an invalid port."""
        if not 0 <= port < MAX_UART_PORTS:
            return None
        return bytes(self._uart[port].tx)

    def gpio_get_value(self, pin: int) -> int:
        """Pin value (0 or 1), or -1 for an invalid pin."""
        if not 0 <= pin < MAX_GPIO_PINS:
            return -1
        return self._gpio[pin].value

    def gpio_get_mode(self, pin: int) -> MockGpioMode:
        """Pin mode; INPUT for an invalid pin."""
        if not 0 <= pin < MAX_GPIO_PINS:
            return MockGpioMode.INPUT
        return self._gpio[pin].mode

    # Checks

    def _pin(self, pin: int, need_init: bool = True) -> _GpioState:
        if not 0 <= pin < MAX_GPIO_PINS:
            raise MockError(MockError.OUT_OF_BOUNDS)
        state = self._gpio[pin]
        if need_init and not state.initialized:
            raise MockError(MockError.NOT_INITIALIZED)
        return state

    def _port(self, port: int, need_init: bool = True) -> _UartState:
        if not 0 <= port < MAX_UART_PORTS:
            raise MockError(MockError.OUT_OF_BOUNDS)
        state = self._uart[port]
        if need_init and not state.initialized:
            raise MockError(MockError.NOT_INITIALIZED)
        return state

    # GPIO

    def gpio_init(self, pin: int, mode: MockGpioMode) -> None:
        state = self._pin(pin, need_init=False)
        state.initialized = True
        state.mode = MockGpioMode(mode)
        state.value = 0

    def gpio_write(self, pin: int, value: int) -> None:
        """Set an output pin; any non-zero value is stored as 1."""
        state = self._pin(pin)
        if state.mode != MockGpioMode.OUTPUT:
            raise MockError(MockError.INVALID_ARG)
        state.value = 1 if value else 0

    def gpio_read(self, pin: int) -> int:
        return self._pin(pin).value

    # UART

    def uart_init(self, port: int, baudrate: int) -> None:
        """Initialise a port, clearing its buffers."""
        state = self._port(port, need_init=False)
        if baudrate <= 0:
            raise MockError(MockError.INVALID_ARG)
        state.initialized = True
        state.baudrate = baudrate
        state.tx = bytearray()
        state.rx = b""
        state.rx_pos = 0

    def uart_putc(self, port: int, c: Union[int, bytes, str]) -> None:
        state = self._port(port)
        if len(state.tx) >= UART_BUFFER_SIZE:
            raise MockError(MockError.BUSY)
        state.tx.append(_to_byte(c))

    def uart_getc(self, port: int) -> bytes:
        """Next received byte; raises TIMEOUT when none is waiting."""
        state = self._port(port)
        if state.rx_pos >= len(state.rx):
            raise MockError(MockError.TIMEOUT)
        byte = state.rx[state.rx_pos : state.rx_pos + 1]
        state.rx_pos += 1
        return byte

    def uart_write(self, port: int, data: Optional[bytes]) -> None:
        """Append bytes to the transmit buffer; raises BUSY once it is full."""
        state = self._port(port)
        if data is None:
            raise MockError(MockError.INVALID_ARG)
        for byte in bytes(data):
            if len(state.tx) >= UART_BUFFER_SIZE:
                raise MockError(MockError.BUSY)
            state.tx.append(byte)

    def uart_read(self, port: int, max_len: int) -> bytes:
        """Up to ``max_len`` received bytes; empty when none are waiting."""
        state = self._port(port)
        if max_len < 0:
            raise MockError(MockError.INVALID_ARG)
        chunk = state.rx[state.rx_pos : state.rx_pos + max_len]
        state.rx_pos += len(chunk)
        return chunk

    # Timer

    def millis(self) -> int:
        return self._millis

    def micros(self) -> int:
        return self._micros

    def delay_ms(self, ms: int) -> None:
        """Advance both counters instead of sleeping."""
        self._millis = (self._millis + ms) & _U32_MASK
        self._micros = (self._micros + ms * 1000) & _U64_MASK

    def delay_us(self, us: int) -> None:
        """Advance both counters instead of sleeping."""
        self._micros = (self._micros + us) & _U64_MASK
        self._millis = (self._millis + us // 1000) & _U32_MASK

    # System

    def system_reset(self) -> None:
        self.reset()

    def system_info(self) -> str:
        return "Mock HAL v1.0"