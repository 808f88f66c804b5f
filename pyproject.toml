[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calcgarden"
version = "1.0.0"
description = "A collection of small interactive command-line calculators and their arithmetic functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "arithmetic", "command-line", "interactive", "math"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
calcgarden-donnie = "calcgarden.donnie:main"
calcgarden-chykb = "calcgarden.chykb:main"
calcgarden-codescience = "calcgarden.codescience:main"
calcgarden-destinedcodes = "calcgarden.destinedcodes:main"
calcgarden-edwin = "calcgarden.edwin_cli:main"
calcgarden-evance = "calcgarden.evance_cli:main"
calcgarden-hullaah = "calcgarden.hullaah:main"
calcgarden-maryanemwende = "calcgarden.maryanemwende:main"
calcgarden-namujibril = "calcgarden.namujibril:main"
calcgarden-samuelogboye = "calcgarden.samuelogboye:main"
calcgarden-shazaaly = "calcgarden.shazaaly:main"
calcgarden-techdanny = "calcgarden.techdanny:main"
calcgarden-ukasquared = "calcgarden.ukasquared:main"
calcgarden-youngman = "calcgarden.youngman:main"
calcgarden-dohoudaniel = "calcgarden.dohoudaniel_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["calcgarden"]

[tool.hatch.build.targets.sdist]
include = ["calcgarden", "tests", "README.md", "pyproject.toml"]

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
warn_redundant_casts = true
