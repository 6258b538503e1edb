[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codeopener"
version = "0.1.0"
description = "Turn the recently opened projects of VS Code, VSCodium or Cursor into Start Menu shortcuts on Windows"
requires-python = ">=3.10"
keywords = ["vscode", "vscodium", "cursor", "shortcuts", "start-menu", "windows", "tui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: Developers",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
codeopener = "codeopener.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["codeopener"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
