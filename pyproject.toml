[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wampkit"
version = "0.1.0"
description = "Building blocks for WAMP clients: procedure invocations, authentication challenges and argument lookup helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["wamp", "rpc", "invocation", "messaging"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wampkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
