[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gpc"
version = "0.1.0"
description = "Front end of a small C-like compiler: tokenizer, syntax tree parser and register interference graph"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "ast", "register-allocation"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gpc = "gpc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gpc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
