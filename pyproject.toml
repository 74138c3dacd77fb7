[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keyfall"
version = "0.1.0"
description = "Falling-note piano visualiser driven by a live MIDI input device"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["midi", "piano", "visualiser", "keyboard", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
keyfall = "keyfall.app:main"

[tool.hatch.build.targets.wheel]
packages = ["keyfall"]

[tool.pytest.ini_options]
addopts = "-ra"
