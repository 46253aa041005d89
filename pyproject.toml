[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codexkit"
version = "0.1.0"
description = "Small collection of data structures, binary serializers and a strict .env parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["data-structures", "red-black-tree", "linked-list", "serialization", "dotenv"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["codexkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
