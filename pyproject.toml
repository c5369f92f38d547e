[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "embkit"
version = "0.1.0"
description = "Embedded-style building blocks: ring buffers, message queues, a cooperative tick scheduler with software timers, a real-time clock/calendar, frame packing and byte-level helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "embedded",
    "circular-buffer",
    "queue",
    "scheduler",
    "software-timer",
    "rtc",
    "calendar",
    "bit-manipulation",
    "can",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
embkit-clock = "embkit.app:main"
embkit-games = "embkit.games:main"

[tool.hatch.build.targets.wheel]
packages = ["embkit"]

[tool.hatch.build.targets.sdist]
include = ["embkit", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
