[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "btreefs"
version = "0.1.0"
description = "An in-memory file system whose directories are B-trees, with an interactive shell"
requires-python = ">=3.10"
keywords = ["b-tree", "filesystem", "shell", "in-memory", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
btreefs = "btreefs.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["btreefs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
