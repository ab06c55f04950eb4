[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdstudio"
version = "0.1.0"
description = "A small desktop studio for browsing and editing Markdown files"
requires-python = ">=3.10"
keywords = ["markdown", "editor", "notes", "desktop", "tkinter", "file-watcher"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mdstudio = "mdstudio.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mdstudio"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
