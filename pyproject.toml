[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainfreeze"
version = "0.1.0"
description = "Turn EVM node responses (blocks, transactions, traces, logs, state diffs) into column tables"
requires-python = ">=3.10"
keywords = ["evm", "ethereum", "traces", "logs", "state-diffs", "dataset", "columns"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Information Analysis",
]
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["chainfreeze"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
