[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primer"
version = "0.1.0"
description = "Small, self-contained programs and libraries for learning everyday programming techniques"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "education",
    "examples",
    "palindrome",
    "bzip2",
    "fractal",
    "temperature",
    "deep-equality",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
primer-dup = "primer.dup:main"
primer-echo = "primer.echo:main"
primer-fetch = "primer.fetch:main"
primer-fetchall = "primer.fetch:fetch_all_main"
primer-cf = "primer.tempconv:main"
primer-text = "primer.text:main"
primer-lissajous = "primer.lissajous:main"
primer-mandelbrot = "primer.mandelbrot:main"
primer-surface = "primer.surface:main"
primer-jpeg = "primer.jpeg:main"
primer-charcount = "primer.charcount:main"
primer-movie = "primer.movie:main"
primer-digest = "primer.digest:main"
primer-issues = "primer.issues:main"
primer-bzipper = "primer.bzip:main"

[tool.hatch.build.targets.wheel]
packages = ["primer"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
