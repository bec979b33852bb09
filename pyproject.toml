[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "convweights"
version = "0.1.0"
description = "Fold batch normalisation into convolution weights and lay out padded, interleaved weight arrays as C headers"
requires-python = ">=3.10"
dependencies = []
keywords = ["batch-norm", "convolution", "c-header", "weights", "accelerator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["convweights*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
