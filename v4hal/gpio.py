"""GPIO access with pin validation, and a pin object bound to one pin."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .errors import ErrorCode, HalError
from .types import GpioIrqEdge, GpioMode, GpioValue

__all__ = ["Gpio", "GpioPin"]


class Gpio:
    """Checks pin numbers against the platform's range, then calls the platform."""

    def __init__(self, platform: Any) -> None:
        self._platform = platform

    def _validate(self, pin: int) -> None:
        if pin < 0 or pin >= self._platform.max_gpio_pins:
            raise HalError(ErrorCode.PARAM)

    def mode(self, pin: int, mode: GpioMode) -> None:
        """Configure a pin's mode."""
        self._validate(pin)
        self._platform.gpio_mode(pin, GpioMode(mode))

    def write(self, pin: int, value: GpioValue) -> None:
        """Drive an output pin to ``value``."""
        self._validate(pin)
        self._platform.gpio_write(pin, GpioValue(value))

    def read(self, pin: int) -> GpioValue:
        """Return the current level of a pin."""
        self._validate(pin)
        return GpioValue(self._platform.gpio_read(pin))

    def toggle(self, pin: int) -> None:
        """Write the opposite of the pin's current level."""
        self.write(pin, self.read(pin).inverted())

    def irq_attach(
        self,
        pin: int,
        edge: GpioIrqEdge,
        handler: Callable[[int, Any], None],
        user_data: Optional[Any] = None,
    ) -> None:
        """Pin interrupts are not supported."""
        raise HalError(ErrorCode.NOTSUP)

    def irq_detach(self, pin: int) -> None:
        """Pin interrupts are not supported."""
        raise HalError(ErrorCode.NOTSUP)

    def irq_enable(self, pin: int) -> None:
        """Pin interrupts are not supported."""
        raise HalError(ErrorCode.NOTSUP)

    def irq_disable(self, pin: int) -> None:
        """Pin interrupts are not supported."""
        raise HalError(ErrorCode.NOTSUP)


class GpioPin:
    """One GPIO pin, configured on construction."""

    def __init__(self, gpio: Gpio, pin: int, mode: GpioMode) -> None:
        gpio.mode(pin, mode)
        self._gpio = gpio
        self._pin = pin

    def write(self, value: GpioValue) -> None:
        self._gpio.write(self._pin, value)

    def read(self) -> GpioValue:
        return self._gpio.read(self._pin)

    def toggle(self) -> None:
        self._gpio.toggle(self._pin)

    def pin(self) -> int:
        """The pin number."""
        return self._pin

    def __repr__(self) -> str:
        return f"GpioPin({self._pin})"