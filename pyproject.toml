[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scalargrad"
version = "0.1.0"
description = "A tiny scalar-valued automatic differentiation engine with a small neural network library"
requires-python = ">=3.10"
dependencies = []
keywords = ["autograd", "backpropagation", "neural-network", "mlp", "gradient-descent"]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scalargrad = "scalargrad.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["scalargrad"]

[tool.pytest.ini_options]
addopts = "-ra"
