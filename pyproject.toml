[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schoolbook"
version = "1.1.0"
description = "Terminal records manager for students, teachers and courses, stored in plain text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["school", "students", "teachers", "courses", "records", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
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
test = ["pytest"]

[project.scripts]
schoolbook = "schoolbook.app:main"

[tool.hatch.build.targets.wheel]
packages = ["schoolbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
