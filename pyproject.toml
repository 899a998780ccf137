[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "laminar"
version = "0.1.0"
description = "Packet headers, wrapping sequence numbers and reliability building blocks for a semi-reliable UDP protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["udp", "networking", "protocol", "packets", "sequence-numbers", "games"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["laminar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
