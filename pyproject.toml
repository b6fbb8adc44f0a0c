[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "remoteresolution"
version = "0.1.0"
description = "Shared primitives and resolver building blocks for remote resource resolution requests"
requires-python = ">=3.10"
dependencies = []
keywords = ["resolution", "resolver", "remote resources", "framework"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["remoteresolution"]

[tool.pytest.ini_options]
addopts = "-ra"
