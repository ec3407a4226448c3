[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "radiokit"
version = "0.1.0"
description = "Firmware XOR ciphers, checksums, flash maps, DFU/HID protocol helpers and YModem transfer for amateur radios"
requires-python = ">=3.10"
dependencies = []
keywords = ["ham radio", "dmr", "firmware", "dfu", "ymodem", "checksum", "flash"]
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
    "Topic :: Communications :: Ham Radio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["radiokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
