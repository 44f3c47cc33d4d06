# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Structured representation of the resources requested for a single task.

This module defines the `TaskResources` dataclass, which captures the job name,
working directory, queue, parallel environment, CPU count, walltime, and memory
that are translated into SGE submission directives.
"""

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Self

from qsge_lib.core.common import parse_walltime
from qsge_lib.core.error import QSGEError
from qsge_lib.core.logger import get_logger

from .size import Size

logger = get_logger(__name__)

# Default name of the file collecting the merged stdout and stderr of a task.
LOG_FILE_NAME = ".command.log"


@dataclass(frozen=True)
class TaskResources:
    """
    Resources requested for one submission of a task.
    """

    # Name of the job as shown by the batch system
    job_name: str

    # Directory the task runs in; the log file is placed here
    work_dir: Path

    # Name of the file collecting the merged stdout and stderr of the task
    log_file_name: str = LOG_FILE_NAME

    # Name of the queue to submit to
    queue: str | None = None

    # Name of the parallel environment used for multi-slot jobs
    penv: str | None = None

    # Number of CPU cores (slots) to request
    ncpus: int = 1

    # Maximum allowed runtime of the task
    walltime: timedelta | None = None

    # Amount of memory to request
    mem: Size | None = None

    def __post_init__(self):
        if not self.job_name or not self.job_name.strip():
            raise QSGEError("Job name must not be empty.")

        if not isinstance(self.ncpus, int) or self.ncpus < 1:
            raise QSGEError(
                f"Number of CPUs must be a positive integer, not '{self.ncpus}'."
            )

        if self.walltime is not None and self.walltime < timedelta(0):
            raise QSGEError(f"Walltime cannot be negative: '{self.walltime}'.")

        # accept plain strings for convenience
        if not isinstance(self.work_dir, Path):
            object.__setattr__(self, "work_dir", Path(self.work_dir))

    @property
    def log_file(self) -> Path:
        """Path to the log file of the task."""
        return self.work_dir / self.log_file_name

    @classmethod
    def fromStrings(
        cls,
        job_name: str,
        work_dir: Path | str,
        queue: str | None = None,
        penv: str | None = None,
        ncpus: int | None = None,
        walltime: str | None = None,
        mem: str | None = None,
        log_file_name: str | None = None,
    ) -> Self:
        """
        Create TaskResources from human-readable values, e.g. command line options.

        Args:
            job_name (str): Name of the job.
            work_dir (Path | str): Working directory of the task.
            queue (str | None): Name of the queue.
            penv (str | None): Name of the parallel environment.
            ncpus (int | None): Number of CPU cores. Defaults to 1.
            walltime (str | None): Walltime as HH:MM:SS or in the wdhms format (e.g. '1d12h').
            mem (str | None): Memory size, e.g. '4gb' or '512mb'.
            log_file_name (str | None): Name of the log file. Defaults to `.command.log`.

        Returns:
            TaskResources: The parsed resources.

        Raises:
            QSGEError: If any of the values is invalid.
        """
        kwargs = {}
        if log_file_name is not None:
            kwargs["log_file_name"] = log_file_name

        res = cls(
            job_name=job_name,
            work_dir=Path(work_dir),
            queue=queue or None,
            penv=penv or None,
            ncpus=1 if ncpus is None else ncpus,
            walltime=parse_walltime(walltime) if walltime else None,
            mem=Size.fromString(mem) if mem else None,
            **kwargs,
        )
        logger.debug(f"Parsed task resources: {res}.")
        return res
