[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textemboss"
version = "0.1.0"
description = "A common interface for extracting text from images through local-program, HTTP or no-op embossers."
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["ocr", "text", "image", "emboss", "text-extraction"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Recognition",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
emboss = "textemboss.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["textemboss"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
