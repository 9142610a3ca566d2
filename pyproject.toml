[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deskutils"
version = "0.1.0"
description = "Small desktop utilities: a hex dump viewer, a calculator and disassembly line highlighting"
requires-python = ">=3.10"
dependencies = []
keywords = ["hexdump", "calculator", "disassembly", "highlighting", "tkinter", "desktop"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
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
deskutils-hexdump = "deskutils.hexapp:main"
deskutils-calc = "deskutils.calcapp:main"

[tool.hatch.build.targets.wheel]
packages = ["deskutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
