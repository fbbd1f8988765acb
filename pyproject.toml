[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genco"
version = "0.1.0"
description = "Code generation building blocks: Avro to OpenAPI translation, JSON parse trees, byte-range file editing and a SQLite index of Java import routes"
requires-python = ">=3.10"
dependencies = []
keywords = ["code generation", "avro", "openapi", "json", "java", "templates"]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["genco"]

[tool.pytest.ini_options]
addopts = "-ra"
