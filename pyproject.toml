[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "footballsim"
version = "0.1.0"
description = "Domain model and application services for a football management simulator"
requires-python = ">=3.10"
dependencies = []
keywords = ["football", "soccer", "management", "simulation", "domain-model"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["footballsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
