[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqtkit"
version = "0.1.0"
description = "Query option extraction, parameter packing and result decoding helpers for ODBC and PostgreSQL front-ends"
requires-python = ">=3.10"
dependencies = []
keywords = ["sql", "postgresql", "odbc", "query", "database"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sqtkit"]

[tool.pytest.ini_options]
addopts = "-ra"
