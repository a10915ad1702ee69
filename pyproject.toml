[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ptlab"
version = "0.1.0"
description = "Counting semaphores, bounded queues, a thread-safe bounded queue and an ordered event logger, with small demos"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "semaphore",
    "bounded queue",
    "producer consumer",
    "monitor",
    "concurrency",
    "threading",
    "event log",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ptlab-demos = "ptlab.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["ptlab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
