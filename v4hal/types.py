"""Value types shared across the HAL: pin modes, levels, UART settings, capabilities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag

__all__ = ["GpioMode", "GpioValue", "GpioIrqEdge", "UartConfig", "Capabilities"]


class GpioMode(IntEnum):
    """GPIO pin mode."""

    INPUT = 0
    INPUT_PULLUP = 1
    INPUT_PULLDOWN = 2
    OUTPUT = 3
    OUTPUT_OD = 4

    def is_output(self) -> bool:
        """True for push-pull and open-drain output modes."""
        return self in (GpioMode.OUTPUT, GpioMode.OUTPUT_OD)


class GpioValue(IntEnum):
    """Logic level of a GPIO pin."""

    LOW = 0
    HIGH = 1

    def inverted(self) -> GpioValue:
        """Return the opposite level."""
        return GpioValue.LOW if self is GpioValue.HIGH else GpioValue.HIGH


class GpioIrqEdge(IntFlag):
    """Edge(s) on which a GPIO interrupt fires."""

    RISING = 0x01
    FALLING = 0x02
    BOTH = 0x03


@dataclass(frozen=True)
class UartConfig:
    """UART line settings; parity is 0 for none, 1 for odd, 2 for even."""

    baudrate: int
    data_bits: int = 8
    stop_bits: int = 1
    parity: int = 0


@dataclass(frozen=True)
class Capabilities:
    """Hardware resources and features a platform offers."""

    gpio_count: int = 0
    uart_count: int = 0
    spi_count: int = 0
    i2c_count: int = 0
    has_adc: bool = False
    has_dac: bool = False
    has_pwm: bool = False
    has_rtc: bool = False
    has_dma: bool = False