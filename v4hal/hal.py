"""HAL lifecycle, platform capabilities, console I/O and critical sections."""

from __future__ import annotations

from typing import Any, Optional

from .errors import check
from .gpio import Gpio
from .platform import PosixPlatform
from .types import Capabilities
from .uart import UartBus

__all__ = ["Hal", "CriticalSection"]


def _run_hook(platform: Any, name: str) -> None:
    """Call an optional platform hook; a negative integer result raises HalError."""
    hook = getattr(platform, name, None)
    if hook is None:
        return
    result = hook()
    if isinstance(result, int):
        check(result)


class Hal:
    """Entry point to one platform's HAL services.

    Used as a context manager, it initialises the platform on entry and
    deinitialises it on exit. Platforms may supply optional ``init``,
    ``reset`` and ``deinit`` hooks; without them these steps do nothing.
    """

    def __init__(self, platform: Optional[Any] = None) -> None:
        self.platform = platform if platform is not None else PosixPlatform()
        self.gpio = Gpio(self.platform)
        self.uart = UartBus(self.platform)

    def init(self) -> None:
        """Initialise the platform; raises HalError if its hook reports failure."""
        _run_hook(self.platform, "init")

    def reset(self) -> None:
        """Return the platform's peripherals to their initial state."""
        _run_hook(self.platform, "reset")

    def deinit(self) -> None:
        """Release the platform's resources."""
        hook = getattr(self.platform, "deinit", None)
        if hook is not None:
            hook()

    def capabilities(self) -> Capabilities:
        """Resources the platform offers; all zero if it does not say."""
        provider = getattr(self.platform, "capabilities", None)
        if provider is None:
            return Capabilities()
        return provider()

    def console_write(self, data: bytes) -> int:
        """Write bytes to the console; returns the number written."""
        return check(self.platform.console_write(bytes(data)))

    def console_read(self, size: int) -> bytes:
        """Read up to ``size`` bytes from the console, blocking for the first."""
        return self.platform.console_read(size)

    def critical_enter(self) -> None:
        """Enter a critical section; must be paired with :meth:`critical_exit`."""
        self.platform.critical_enter()

    def critical_exit(self) -> None:
        """Leave a critical section entered with :meth:`critical_enter`."""
        self.platform.critical_exit()

    def critical(self) -> CriticalSection:
        """A context manager holding a critical section for its block."""
        return CriticalSection(self)

    def __enter__(self) -> Hal:
        self.init()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.deinit()


class CriticalSection:
    """Holds a critical section for the duration of a ``with`` block."""

    def __init__(self, hal: Hal) -> None:
        self._hal = hal

    def __enter__(self) -> CriticalSection:
        self._hal.critical_enter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._hal.critical_exit()