[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dijkstra-plot"
version = "0.1.0"
description = "Run Dijkstra's algorithm on a GraphML graph and write a plot-ready data file with a force-directed layout."
requires-python = ">=3.10"
dependencies = []
keywords = ["dijkstra", "graph", "graphml", "shortest-path", "layout", "gnuplot"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dijkstra-plot = "dijkstra_plot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dijkstra_plot"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
