[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "p2psync"
version = "0.1.0"
description = "Peer-to-peer transport, discovery and block synchronisation primitives built on asyncio"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "p2p",
    "peer-to-peer",
    "networking",
    "asyncio",
    "tcp",
    "blockchain",
    "block-sync",
    "fibonacci",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Framework :: AsyncIO",
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
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
p2psync-fibonacci = "p2psync.fibonacci:main"

[tool.hatch.build.targets.wheel]
packages = ["p2psync"]

[tool.hatch.build.targets.sdist]
include = ["p2psync", "tests"]

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
warn_unused_ignores = true
warn_redundant_casts = true
