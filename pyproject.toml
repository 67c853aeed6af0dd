[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "v4hal"
version = "0.2.0"
description = "Hardware abstraction layer for the V4 VM: GPIO, UART, timers, console I/O and critical sections, with a simulated host platform and a recording mock"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hal",
    "hardware abstraction layer",
    "gpio",
    "uart",
    "embedded",
    "simulation",
    "mock",
    "v4",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
v4hal-blink = "v4hal.blink:main"

[tool.hatch.build.targets.wheel]
packages = ["v4hal"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
