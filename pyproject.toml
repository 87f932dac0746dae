[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exerunner"
version = "5.4.1"
description = "Helpers for a course of small programming exercises: status messages, rust-project.json generation and worked solutions."
requires-python = ">=3.11"
keywords = ["exercises", "learning", "teaching", "rust-analyzer", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = [
    "rich",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["exerunner"]

[tool.pytest.ini_options]
addopts = "-ra"
