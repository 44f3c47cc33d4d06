# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
SGE backend for qsge: submission directives, commands, and output parsing.

This module implements qsge's translation layer for the Sun/Oracle/Open Grid
Engine family. The `SGE` class builds the `#$` directive header of a job
script from the requested resources, assembles the `qsub`, `qstat`, and
`qdel` command lines, extracts the job ID from the output of `qsub`, and
decodes the `qstat` listing into a queue snapshot.
"""

from .sge import SGE

__all__ = [
    "SGE",
]
