[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multistaking"
version = "0.1.0"
description = "Multi-token staking bookkeeping: weighted coins, locks, unlocks, store keys and governance proposals."
requires-python = ">=3.10"
dependencies = []
keywords = ["staking", "bond-weight", "bech32", "governance", "fixed-point"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["multistaking"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
