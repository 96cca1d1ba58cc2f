[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "htmldom"
version = "0.1.0"
description = "A small HTML tokenizer, tree builder, DOM and CSS-style query engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "parser", "dom", "tokenizer", "selector", "query"]
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
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["htmldom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
