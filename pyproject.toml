[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "retainedui"
version = "0.1.0"
description = "A small retained-mode UI toolkit with flexbox layout, inheritable styles and theming, drawn with pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["ui", "gui", "retained-mode", "flexbox", "layout", "pygame", "widgets"]
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
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
retainedui-demo = "retainedui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["retainedui"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
