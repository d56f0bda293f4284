[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "statusblocks"
version = "0.1.0"
description = "Data collection and state logic for status bar blocks: memory, uptime, mail, music, network, GPU, sound, weather and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["status bar", "monitoring", "blocks", "memory", "uptime", "maildir"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["statusblocks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
