[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "userland"
version = "0.1.0"
description = "User-space application registry with shell, AI, monitor, network, storage and debug catalogues"
requires-python = ">=3.10"
dependencies = []
keywords = ["operating-system", "userland", "applications", "registry", "capabilities"]
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
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["userland"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
