"""Hardware abstraction layer for the V4 VM: GPIO, UART, timers, console and critical sections, with a simulated host platform and a recording mock."""

__version__ = "0.2.0"

__all__ = ["__version__"]