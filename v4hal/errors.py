"""Error codes, their descriptions and the exception raised for them."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ErrorCode", "HalError", "strerror", "check"]


class ErrorCode(IntEnum):
    """Result codes: zero is success, negative values are errors."""

    OK = 0
    PARAM = -1
    TIMEOUT = -3
    IO = -5
    NODEV = -6
    NOTSUP = -7


_DESCRIPTIONS = {
    ErrorCode.OK: "Success",
    ErrorCode.PARAM: "Invalid parameter",
    ErrorCode.TIMEOUT: "Operation timed out",
    ErrorCode.IO: "I/O error",
    ErrorCode.NODEV: "No such device",
    ErrorCode.NOTSUP: "Operation not supported",
}


def strerror(err: int) -> str:
    """Return a human-readable description of an error code."""
    try:
        return _DESCRIPTIONS[ErrorCode(err)]
    except ValueError:
        return "Unknown error"


class HalError(RuntimeError):
    """Raised when a HAL operation fails; carries the negative error code."""

    def __init__(self, code: int) -> None:
        super().__init__(strerror(code))
        self.code = int(code)


def check(result: int) -> int:
    """Return ``result`` unchanged, raising :class:`HalError` if it is negative."""
    if result < 0:
        raise HalError(result)
    return result