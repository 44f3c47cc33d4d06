# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Translation layer between abstract job requests and Grid Engine (SGE/OGE).

This package builds the `#$` directive header of a job script from the
requested resources, assembles the `qsub`, `qstat`, and `qdel` command lines,
extracts job IDs from the output of `qsub`, and decodes `qstat` listings into
queue snapshots. Running the scheduler commands is left to the caller; the
`qsge` command line exposes every translation for use from shell scripts.
"""

from .qsge import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "batch",
    "core",
    "properties",
    "stat",
]
