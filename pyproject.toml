[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vsh"
version = "0.1.0"
description = "A small interactive POSIX shell with line editing, on-disk history and built-in cd, pwd and echo"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "repl", "history", "terminal", "line-editing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vsh = "vsh.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["vsh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
