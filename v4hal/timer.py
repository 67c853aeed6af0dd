"""Time measurement and blocking delays on top of a platform's clock."""

from __future__ import annotations

from typing import Any

__all__ = ["Timer"]

_U32_MASK = 0xFFFFFFFF
_U64_MASK = 0xFFFFFFFFFFFFFFFF


class Timer:
    """Millisecond and microsecond clocks, delays and elapsed-time helpers."""

    def __init__(self, platform: Any) -> None:
        self._platform = platform

    def millis(self) -> int:
        """Milliseconds since startup; wraps after about 49 days (32 bits)."""
        return self._platform.millis() & _U32_MASK

    def micros(self) -> int:
        """Microseconds since startup (64-bit counter)."""
        return self._platform.micros() & _U64_MASK

    def delay_ms(self, ms: int) -> None:
        """Block for ``ms`` milliseconds."""
        self._platform.delay_ms(ms)

    def delay_us(self, us: int) -> None:
        """Block for ``us`` microseconds."""
        self._platform.delay_us(us)

    def elapsed_ms(self, start_ms: int) -> int:
        """Milliseconds since ``start_ms``, allowing for one 32-bit wrap-around."""
        return (self.millis() - start_ms) & _U32_MASK

    def elapsed_us(self, start_us: int) -> int:
        """Microseconds since ``start_us``."""
        return (self.micros() - start_us) & _U64_MASK