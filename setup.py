import setuptools

# Project metadata and dependencies are listed in pyproject.toml
# [project] ; the numba kernels are compiled at run-time, no extension
# module is built here.

setuptools.setup()
