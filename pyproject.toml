[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ytgrab"
version = "0.1.0"
description = "A small desktop front end for downloading YouTube videos with yt-dlp, with live progress and thumbnails."
requires-python = ">=3.10"
keywords = ["youtube", "yt-dlp", "downloader", "video", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]
dependencies = [
    "requests",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ytgrab = "ytgrab.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ytgrab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
