[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tabungan"
version = "0.1.0"
description = "Building blocks for a small savings-account service: customer registration, balance checks, deposits and withdrawals."
requires-python = ">=3.10"
keywords = ["savings", "bank", "deposit", "withdraw", "balance", "flask", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]
dependencies = [
    "flask>=2.2",
    "bcrypt>=4.0",
    "python-dotenv>=1.0",
    "python-slugify>=8.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
tabungan-migrate = "tabungan.migration:main"

[tool.hatch.build.targets.wheel]
packages = ["tabungan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
