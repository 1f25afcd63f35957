[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oscalib"
version = "0.1.0"
description = "A small freestanding C-style runtime: ctype, math, number parsing, byte strings, printf-style formatting, a VGA text terminal model, a block heap and a byte vector."
requires-python = ">=3.10"
dependencies = []
keywords = ["libc", "vga", "terminal", "heap", "printf", "kernel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
oscalib-kernel = "oscalib.kernel:main"

[tool.hatch.build.targets.wheel]
packages = ["oscalib"]

[tool.pytest.ini_options]
addopts = "-ra"
