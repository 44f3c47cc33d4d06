# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import re
from pathlib import Path

from qsge_lib.batch.interface import Directive, GridInterface
from qsge_lib.core.common import format_duration_hhmmss
from qsge_lib.core.error import InvalidSubmitResponse, QSGEError
from qsge_lib.core.logger import get_logger
from qsge_lib.properties.resources import TaskResources
from qsge_lib.properties.states import QueueStatus

from .common import (
    QSTAT_JOB_ID_COLUMN,
    QSTAT_STATE_COLUMN,
    last_line,
    split_qstat_rows,
)

logger = get_logger(__name__)


class SGE(GridInterface):
    """
    Implementation of GridInterface for the Sun/Oracle/Open Grid Engine family.
    """

    # verbose qsub output: Your job 12345 ("name") has been submitted
    _VERBOSE_PREFIX = "Your job"
    _VERBOSE_SUFFIX = "has been submitted"

    # rwxr-xr-x
    _SCRIPT_MODE = 0o755

    def envName() -> str:
        return "SGE"

    def submitBinary() -> str:
        return "qsub"

    def getHeaderToken() -> str:
        return "#$"

    def getDirectives(res: TaskResources) -> list[Directive]:
        directives = [
            Directive("-N", res.job_name),
            Directive("-o", SGE.quote(res.log_file)),
            # merge stderr into stdout
            Directive("-j", "y"),
        ]

        if res.queue:
            directives.append(Directive("-q", res.queue))

        directives.append(SGE._translateSlots(res))

        if res.walltime is not None:
            directives.append(
                Directive("-l", f"walltime={format_duration_hhmmss(res.walltime)}")
            )

        if res.mem is not None:
            directives.append(Directive("-l", f"mem={res.mem.toGiga()}G"))

        # export the whole submission environment
        directives.append(Directive("-V"))

        logger.debug(f"SGE directives: {[str(d) for d in directives]}")
        return directives

    def translateSubmit(use_piped_launcher: bool, script_name: str) -> list[str]:
        # -terse makes qsub print only the job id; some SGE versions ignore it
        # when given as a script directive so it always goes on the command line
        if use_piped_launcher:
            command = [SGE.submitBinary(), "-"]
        else:
            command = [SGE.submitBinary(), "-terse", script_name]

        logger.debug(command)
        return command

    def getSubmitCommandLine(script: Path, use_piped_launcher: bool) -> list[str]:
        if not use_piped_launcher:
            SGE._makeExecutable(script)

        return SGE.translateSubmit(use_piped_launcher, script.name)

    def parseJobId(text: str) -> str:
        entry = last_line(text)

        if re.fullmatch(r"[0-9]+", entry):
            return entry

        if entry.startswith(SGE._VERBOSE_PREFIX) and entry.endswith(
            SGE._VERBOSE_SUFFIX
        ):
            tokens = entry.split()
            if len(tokens) > 2 and tokens[2]:
                return tokens[2]

        raise InvalidSubmitResponse(text)

    def getKillCommand() -> list[str]:
        return ["qdel"]

    def queueStatusCommand(queue: str | None = None) -> list[str]:
        # listing is intentionally not restricted to the queue
        if queue:
            logger.debug(f"Queue '{queue}' is not used to filter the qstat listing.")

        return ["qstat"]

    def parseQueueStatus(text: str | None) -> dict[str, QueueStatus]:
        snapshot: dict[str, QueueStatus] = {}
        if not text:
            return snapshot

        for columns in split_qstat_rows(text):
            snapshot[columns[QSTAT_JOB_ID_COLUMN]] = QueueStatus.fromCode(
                columns[QSTAT_STATE_COLUMN]
            )

        return snapshot

    def quote(path: Path | str) -> str:
        # SGE directives do not support backslash escapes,
        # so only paths containing blanks are double-quoted
        string = str(path)
        return f'"{string}"' if " " in string else string

    @staticmethod
    def _translateSlots(res: TaskResources) -> Directive:
        """
        Translate the number of requested CPUs into an SGE directive.

        A parallel environment, if specified, takes the place of the plain CPU request.

        Args:
            res (TaskResources): The resources requested for the task.

        Returns:
            Directive: Either `-pe <penv> <ncpus>` or `-l cpu=<ncpus>`.
        """
        if res.penv:
            return Directive("-pe", f"{res.penv} {res.ncpus}")

        return Directive("-l", f"cpu={res.ncpus}")

    @staticmethod
    def _makeExecutable(script: Path) -> None:
        """
        Set the permissions of a script so that the scheduler is allowed to execute it.

        Args:
            script (Path): Path to the script.

        Raises:
            QSGEError: If the permissions could not be changed.
        """
        mode = SGE._SCRIPT_MODE
        logger.debug(f"Setting permissions of '{script}' to {oct(mode)}.")
        try:
            script.chmod(mode)
        except OSError as e:
            raise QSGEError(
                f"Could not set permissions of script '{script}': {e}."
            ) from e
