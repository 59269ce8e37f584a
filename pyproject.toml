[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zxinterceptor"
version = "1.0.0"
description = "A side-scrolling space shooter on an emulated 32x24 character-cell screen, with a few small sprite demos"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "shooter", "arcade", "tiles", "sprites", "retro", "headless"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zxinterceptor = "zxinterceptor.app:main"

[tool.hatch.build.targets.wheel]
packages = ["zxinterceptor"]

[tool.pytest.ini_options]
addopts = "-ra"
