[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "postcart"
version = "0.1.0"
description = "Turn inbound e-mails into postcards: option parsing, ASCII postcard rendering, job records and delivery e-mails"
requires-python = ">=3.10"
dependencies = []
keywords = ["postcard", "email", "ascii-art", "inbound-email"]
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
    "Topic :: Communications :: Email",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["postcart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
