import dataclasses

import pytest

from v4hal.types import Capabilities, GpioIrqEdge, GpioMode, GpioValue, UartConfig


@pytest.mark.parametrize(
    "mode, expected",
    [
        (GpioMode.INPUT, False),
        (GpioMode.INPUT_PULLUP, False),
        (GpioMode.INPUT_PULLDOWN, False),
        (GpioMode.OUTPUT, True),
        (GpioMode.OUTPUT_OD, True),
    ],
)
def test_is_output(mode, expected):
    assert mode.is_output() is expected


def test_mode_numbering_follows_declaration_order():
    assert [GpioMode(number) for number in range(5)] == list(GpioMode)
    assert GpioMode(0) is GpioMode.INPUT
    assert GpioMode(3) is GpioMode.OUTPUT


def test_value_inverted():
    assert GpioValue.LOW.inverted() is GpioValue.HIGH
    assert GpioValue.HIGH.inverted() is GpioValue.LOW


def test_value_double_inversion_is_identity():
    for level in (0, 1):
        value = GpioValue(level)
        assert value.inverted().inverted() is value
        assert value.inverted() is not value


def test_value_levels():
    assert GpioValue(0) is GpioValue.LOW
    assert GpioValue(1) is GpioValue.HIGH


def test_irq_both_is_rising_or_falling():
    combined = GpioIrqEdge(int(GpioIrqEdge.RISING) | int(GpioIrqEdge.FALLING))
    assert combined is GpioIrqEdge.BOTH
    assert GpioIrqEdge(0x03) is GpioIrqEdge.BOTH


def test_uart_config_defaults_to_8n1():
    config = UartConfig(115200)
    assert config == UartConfig(115200, 8, 1, 0)


def test_uart_config_is_immutable():
    config = UartConfig(9600)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.baudrate = 115200
    assert config.baudrate == 9600


def test_capabilities_default_to_nothing():
    caps = Capabilities()
    assert (caps.gpio_count, caps.uart_count, caps.spi_count, caps.i2c_count) == (0, 0, 0, 0)
    assert not any((caps.has_adc, caps.has_dac, caps.has_pwm, caps.has_rtc, caps.has_dma))