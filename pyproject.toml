[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "icecore"
version = "0.1.0"
description = "Core building blocks for Interactive Connectivity Establishment: candidate and network types, STUN messages and ICE attributes, 1:1 NAT mapping and random identifiers."
requires-python = ">=3.10"
dependencies = []
keywords = ["ice", "stun", "nat", "webrtc", "networking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["icecore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
