import io

import pytest

from v4hal.errors import ErrorCode, HalError
from v4hal.platform import PosixPlatform
from v4hal.types import UartConfig
from v4hal.uart import Uart, UartBus

CONFIG = UartConfig(115200, 8, 1, 0)


@pytest.fixture
def out():
    return io.BytesIO()


@pytest.fixture
def bus(out):
    return UartBus(PosixPlatform(stdout=out, stdin=io.BytesIO()))


def test_construction(bus):
    uart = Uart(bus, 0, CONFIG)
    assert uart.is_open() is True
    uart.close()
    assert uart.is_open() is False


def test_write(bus, out):
    with Uart(bus, 0, CONFIG) as uart:
        assert uart.write(b"Hello") == 5
    assert out.getvalue() == b"Hello"


def test_available(bus):
    with Uart(bus, 0, CONFIG) as uart:
        assert uart.available() == 0


def test_read_returns_nothing(bus):
    with Uart(bus, 0, CONFIG) as uart:
        assert uart.read(10) == b""


def test_other_port_writes_nowhere(bus, out):
    with Uart(bus, 1, UartConfig(9600, 8, 1, 0)) as uart:
        assert uart.write(b"Test") == 0
    assert out.getvalue() == b""


def test_context_manager_closes(bus):
    with Uart(bus, 0, CONFIG) as uart:
        pass
    assert uart.is_open() is False
    with pytest.raises(HalError) as info:
        uart.write(b"Test")
    assert info.value.code == ErrorCode.PARAM


def test_close_twice(bus):
    uart = Uart(bus, 2, CONFIG)
    uart.close()
    uart.close()
    assert uart.is_open() is False


@pytest.mark.parametrize("port", [-1, 4, 10])
def test_invalid_port(bus, port):
    with pytest.raises(HalError) as info:
        Uart(bus, port, CONFIG)
    assert info.value.code == ErrorCode.NODEV


def test_missing_config(bus):
    with pytest.raises(HalError) as info:
        bus.open(0, None)
    assert info.value.code == ErrorCode.NODEV


def test_bus_rejects_missing_handle(bus):
    for call in (
        lambda: bus.close(None),
        lambda: bus.write(None, b"x"),
        lambda: bus.read(None, 1),
        lambda: bus.available(None),
    ):
        with pytest.raises(HalError) as info:
            call()
        assert info.value.code == ErrorCode.PARAM


def test_bus_rejects_missing_data(bus):
    handle = bus.open(0, CONFIG)
    with pytest.raises(HalError) as info:
        bus.write(handle, None)
    assert info.value.code == ErrorCode.PARAM


def test_bus_round(bus, out):
    handle = bus.open(0, CONFIG)
    assert bus.write(handle, bytearray(b"abc")) == 3
    bus.close(handle)
    assert out.getvalue() == b"abc"
    with pytest.raises(HalError) as info:
        bus.available(handle)
    assert info.value.code == ErrorCode.PARAM