[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skeleton"
version = "1.0.0"
description = "A small JSON HTTP service skeleton with configuration, logging, an SQLite database and response helpers"
requires-python = ">=3.10"
keywords = ["http", "service", "skeleton", "flask", "rest", "json", "sqlite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: Flask",
    "Framework :: Pydantic",
    "Operating System :: OS Independent",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "sqlalchemy",
    "pydantic",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
skeleton = "skeleton.main:main"

[tool.hatch.build.targets.wheel]
packages = ["skeleton"]

[tool.pytest.ini_options]
addopts = "-ra"
