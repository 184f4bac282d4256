[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daizen"
version = "0.1.0"
description = "A static site generator with front matter, Markdown rendering, theme layouts and a build cache"
requires-python = ">=3.11"
keywords = ["static-site-generator", "markdown", "blog", "front-matter", "themes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Site Management",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "pyyaml",
    "markdown-it-py",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
daizen = "daizen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["daizen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
ignore_missing_imports = true
