[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stagecraft"
version = "0.1.0"
description = "Scene objects, keyframe motion blending, score counters and asset registries for small game loops"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "animation", "motion", "keyframe", "sprite", "scene", "wave"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stagecraft"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
