[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arkscript"
version = "0.1.0"
description = "ArkScript language building blocks: tokens, AST nodes, lexer, optimizer, error contexts and builtins"
requires-python = ">=3.10"
dependencies = []
keywords = ["arkscript", "lexer", "ast", "optimizer", "builtins", "scripting-language"]
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
    "Topic :: Software Development :: Compilers",
    "Topic :: Software Development :: Interpreters",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arkscript"]

[tool.pytest.ini_options]
addopts = "-ra"
