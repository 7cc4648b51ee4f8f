[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "llmwire"
version = "0.1.0"
description = "Request and response models, form encoding and JSON schema helpers for OpenAI-compatible HTTP APIs"
requires-python = ">=3.10"
dependencies = []
keywords = ["openai", "llm", "api", "json-schema", "embeddings", "multipart"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["llmwire"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
