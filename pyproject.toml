[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schedkit"
version = "0.1.0"
description = "Workload launchers, a round-robin process scheduler, packet descriptors and small container types"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "scheduler",
    "round-robin",
    "signals",
    "processes",
    "workload",
    "data-structures",
    "priority-queue",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
schedkit-cpubound = "schedkit.loadgen:cpu_main"
schedkit-iobound = "schedkit.loadgen:io_main"
schedkit-launch = "schedkit.launcher:main"
schedkit-launch-sync = "schedkit.launcher:synchronized_main"
schedkit-schedule = "schedkit.scheduler:main"
schedkit-schedule-stats = "schedkit.scheduler:stats_main"

[tool.hatch.build.targets.wheel]
packages = ["schedkit"]

[tool.hatch.build.targets.sdist]
include = ["schedkit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
