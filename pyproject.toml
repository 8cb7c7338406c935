[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "servicekit"
version = "0.1.0"
description = "Building blocks for HTTP services: header names, error codes, environment helpers, audit payloads and uniform response envelopes."
requires-python = ">=3.10"
keywords = ["service", "api", "response", "error-codes", "environment", "audit"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = [
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["servicekit"]

[tool.pytest.ini_options]
addopts = "-ra"
