[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nitradoapi"
version = "0.1.0"
description = "A small client for the Nitrado game server hosting API"
requires-python = ">=3.10"
keywords = ["nitrado", "gameserver", "api", "client", "dayz"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "requests>=2.28",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "responses>=0.23",
]

[project.scripts]
nitradoapi = "nitradoapi.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nitradoapi"]

[tool.hatch.build.targets.sdist]
include = ["nitradoapi", "tests", "pyproject.toml"]

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
