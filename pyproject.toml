[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dicomkit"
version = "0.1.0"
description = "DICOM DA/TM/DT value parsing and Specific Character Set decoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["dicom", "medical-imaging", "date", "time", "datetime", "charset"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dicomkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
