[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lamina"
version = "0.1.0"
description = "Packet building blocks for a reliable, ordered, fragmenting protocol on top of UDP"
requires-python = ">=3.10"
dependencies = []
keywords = ["udp", "networking", "reliability", "packets", "protocol", "sequence-numbers"]
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
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lamina"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
