[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modaledit"
version = "0.1.0"
description = "A small modal text editor for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text-editor", "modal", "terminal", "curses", "tui"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
modaledit = "modaledit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["modaledit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
