[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "mdbkit"
version = "0.1.0"
description = "Building blocks for Microsoft Access (Jet) database pages: value decoding, page cipher, page layout and connection strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["access", "jet", "mdb", "database", "rc4", "odbc", "connection-string"]
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
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["mdbkit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
