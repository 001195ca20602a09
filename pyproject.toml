[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdf"
version = "0.1.0"
description = "Wire-frame viewer for height maps stored in .fdf files, with isometric and top-down views"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["wireframe", "heightmap", "isometric", "viewer", "fdf"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fdf = "fdf.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fdf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
