[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tremolo"
version = "1.0.0"
description = "Tremolo audio effect for NumPy buffers with smooth bypass crossfades, LFO curve collection and JSON state"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["audio", "dsp", "tremolo", "lfo", "effect", "bypass", "crossfade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tremolo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
