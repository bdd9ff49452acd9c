[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grafo"
version = "0.1.0"
description = "Read weighted undirected graphs from text and report components, bipartiteness, diameters and cuts"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "bipartite", "diameter", "cut vertices", "bridges", "dijkstra"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grafo = "grafo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["grafo"]

[tool.pytest.ini_options]
addopts = "-ra"
