[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aircopanel"
version = "0.1.0"
description = "State, texts and control logic for a touch panel that operates air-conditioning units over MQTT"
requires-python = ">=3.10"
dependencies = []
keywords = ["air conditioning", "hvac", "mqtt", "touch panel", "home automation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aircopanel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
