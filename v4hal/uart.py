"""UART access by handle, and a port object that closes itself."""

from __future__ import annotations

from typing import Any, Optional

from .errors import ErrorCode, HalError
from .types import UartConfig

__all__ = ["UartBus", "Uart"]


class UartBus:
    """Validates arguments, then calls the platform's UART operations."""

    def __init__(self, platform: Any) -> None:
        self._platform = platform

    def open(self, port: int, config: Optional[UartConfig]) -> Any:
        """Open ``port``; raises ``HalError(NODEV)`` for a bad port or missing config."""
        if config is None or port < 0 or port >= self._platform.max_uart_ports:
            raise HalError(ErrorCode.NODEV)
        handle = self._platform.uart_open(port, config)
        if handle is None:
            raise HalError(ErrorCode.NODEV)
        return handle

    def close(self, handle: Any) -> None:
        if handle is None:
            raise HalError(ErrorCode.PARAM)
        self._platform.uart_close(handle)

    def write(self, handle: Any, data: Optional[bytes]) -> int:
        """Write bytes; returns the number written."""
        if handle is None or data is None:
            raise HalError(ErrorCode.PARAM)
        return self._platform.uart_write(handle, bytes(data))

    def read(self, handle: Any, size: int) -> bytes:
        """Non-blocking read of up to ``size`` bytes."""
        if handle is None or size < 0:
            raise HalError(ErrorCode.PARAM)
        return self._platform.uart_read(handle, size)

    def available(self, handle: Any) -> int:
        """Number of bytes waiting in the receive buffer."""
        if handle is None:
            raise HalError(ErrorCode.PARAM)
        return self._platform.uart_available(handle)


class Uart:
    """An open UART port; usable as a context manager that closes it."""

    def __init__(self, bus: UartBus, port: int, config: UartConfig) -> None:
        self._bus = bus
        self._handle = bus.open(port, config)

    def is_open(self) -> bool:
        return self._handle is not None

    def write(self, data: bytes) -> int:
        return self._bus.write(self._handle, data)

    def read(self, size: int) -> bytes:
        return self._bus.read(self._handle, size)

    def available(self) -> int:
        return self._bus.available(self._handle)

    def close(self) -> None:
        """Close the port; closing twice does nothing."""
        if self._handle is not None:
            handle, self._handle = self._handle, None
            self._bus.close(handle)

    def __enter__(self) -> Uart:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()