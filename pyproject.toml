[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osdrills"
version = "0.1.0"
description = "Small systems tools: Poisson probabilities, shortest paths, maximum subarrays, a phonebook, tic-tac-toe and a socket relay"
requires-python = ">=3.10"
dependencies = []
keywords = ["netcat", "sockets", "tic-tac-toe", "dijkstra", "poisson", "phonebook", "subarray"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osdrills-poisson = "osdrills.poisson:main"
osdrills-maxsubarray = "osdrills.maxsubarray:main"
osdrills-dijkstra = "osdrills.dijkstra:main"
osdrills-add2pb = "osdrills.phonebook:main_add"
osdrills-findphone = "osdrills.phonebook:main_find"
osdrills-ttt = "osdrills.tictactoe:main"
osdrills-mync = "osdrills.mync:main"
osdrills-netcat = "osdrills.netcat:main"

[tool.hatch.build.targets.wheel]
packages = ["osdrills"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
