[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mpcutils"
version = "0.1.0"
description = "Integer range sets, nested identifiers, small sequence helpers and a websocket relay"
requires-python = ">=3.10"
dependencies = [
    "websockets",
]
keywords = ["range-set", "intervals", "identifiers", "websocket", "relay", "tcp"]
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
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "hypothesis",
]

[project.scripts]
mpcutils-relay = "mpcutils.relay:main"

[tool.hatch.build.targets.wheel]
packages = ["mpcutils"]

[tool.hatch.build.targets.sdist]
include = ["mpcutils", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
