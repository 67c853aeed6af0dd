import io

import pytest

from v4hal.errors import ErrorCode, HalError
from v4hal.gpio import Gpio, GpioPin
from v4hal.platform import PosixPlatform
from v4hal.types import GpioIrqEdge, GpioMode, GpioValue


@pytest.fixture
def gpio():
    return Gpio(PosixPlatform(stdout=io.BytesIO(), stdin=io.BytesIO()))


def test_pin_construction_and_accessor(gpio):
    pin = GpioPin(gpio, 13, GpioMode.OUTPUT)
    assert pin.pin() == 13


def test_write_and_read(gpio):
    pin = GpioPin(gpio, 13, GpioMode.OUTPUT)
    pin.write(GpioValue.HIGH)
    assert pin.read() is GpioValue.HIGH
    pin.write(GpioValue.LOW)
    assert pin.read() is GpioValue.LOW


def test_toggle(gpio):
    pin = GpioPin(gpio, 13, GpioMode.OUTPUT)
    pin.toggle()
    assert pin.read() is GpioValue.HIGH
    pin.toggle()
    assert pin.read() is GpioValue.LOW


def test_read_input_pin(gpio):
    pin = GpioPin(gpio, 14, GpioMode.INPUT)
    assert pin.read() in (GpioValue.LOW, GpioValue.HIGH)


def test_write_input_pin_fails(gpio):
    pin = GpioPin(gpio, 14, GpioMode.INPUT)
    with pytest.raises(HalError) as info:
        pin.write(GpioValue.HIGH)
    assert info.value.code == ErrorCode.PARAM


def test_toggle_input_pin_fails(gpio):
    gpio.mode(5, GpioMode.INPUT_PULLUP)
    with pytest.raises(HalError) as info:
        gpio.toggle(5)
    assert info.value.code == ErrorCode.PARAM


def test_open_drain_is_writable(gpio):
    gpio.mode(3, GpioMode.OUTPUT_OD)
    gpio.write(3, GpioValue.HIGH)
    assert gpio.read(3) is GpioValue.HIGH


@pytest.mark.parametrize("pin", [-1, 32, 100])
def test_out_of_range_pins(gpio, pin):
    for call in (
        lambda: gpio.mode(pin, GpioMode.OUTPUT),
        lambda: gpio.write(pin, GpioValue.HIGH),
        lambda: gpio.read(pin),
        lambda: gpio.toggle(pin),
    ):
        with pytest.raises(HalError) as info:
            call()
        assert info.value.code == ErrorCode.PARAM


def test_pin_construction_out_of_range(gpio):
    with pytest.raises(HalError) as info:
        GpioPin(gpio, 32, GpioMode.OUTPUT)
    assert info.value.code == ErrorCode.PARAM


def test_highest_pin_valid(gpio):
    gpio.mode(31, GpioMode.OUTPUT)
    gpio.write(31, GpioValue.HIGH)
    assert gpio.read(31) is GpioValue.HIGH
    assert gpio.read(30) is GpioValue.LOW


def test_irq_not_supported(gpio):
    with pytest.raises(HalError) as info:
        gpio.irq_attach(2, GpioIrqEdge.RISING, lambda pin, data: None, None)
    assert info.value.code == ErrorCode.NOTSUP
    for call in (gpio.irq_detach, gpio.irq_enable, gpio.irq_disable):
        with pytest.raises(HalError) as info:
            call(2)
        assert info.value.code == ErrorCode.NOTSUP