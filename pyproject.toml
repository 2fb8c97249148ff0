[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "easyterminal"
version = "0.1.0"
description = "A terminal task list component with status icons, spinners, messages and progress bars"
requires-python = ">=3.10"
keywords = ["terminal", "tui", "task list", "progress bar", "spinner"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
    "Typing :: Typed",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
easyterminal-demo = "easyterminal.demo:main"
easyterminal-interactive = "easyterminal.interactive:main"

[tool.hatch.build.targets.wheel]
packages = ["easyterminal"]

[tool.pytest.ini_options]
addopts = "-ra"
