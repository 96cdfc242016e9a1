[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chechr"
version = "0.1.0"
description = "A small HTTP health-check service reporting CPU load and RAM usage against configured thresholds"
requires-python = ">=3.10"
dependencies = []
keywords = ["health-check", "monitoring", "cpu", "ram", "http"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: No Input/Output (Daemon)",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chechr = "chechr.app:main"

[tool.hatch.build.targets.wheel]
packages = ["chechr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
