# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Properties of SGE jobs.

This module provides the data representations the SGE translation works on:
the resources requested for a task, memory sizes, and the queue states
decoded from `qstat`.
"""
