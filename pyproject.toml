[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textbench"
version = "0.1.0"
description = "Small text filters, counters and encoders: tab expansion, folding, comment stripping, Base32, Base64, TOTP and UUIDv7."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "text",
    "filters",
    "word-count",
    "histogram",
    "detab",
    "entab",
    "fold",
    "base32",
    "base64",
    "totp",
    "uuidv7",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
textbench = "textbench.cli:main"
textbench-totp = "textbench.totp:main"
textbench-uuid7 = "textbench.uuid7:main"

[tool.hatch.build.targets.wheel]
packages = ["textbench"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
