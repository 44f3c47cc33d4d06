# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import shutil
from abc import ABC
from pathlib import Path

from qsge_lib.core.logger import get_logger
from qsge_lib.properties.resources import TaskResources
from qsge_lib.properties.states import QueueStatus

from .directive import Directive

logger = get_logger(__name__)


class GridInterface(ABC):
    """
    Abstract base class for grid-engine integrations.

    Concrete grid engines implement these methods to translate task resources
    into the engine's submission syntax and to decode the engine's textual output.
    None of the methods executes scheduler commands; running them is up to the caller.
    """

    @staticmethod
    def envName() -> str:
        """
        Return the name of the grid engine.

        Returns:
            str: The grid engine name.
        """
        raise NotImplementedError(
            "envName method is not implemented for this grid engine implementation"
        )

    @staticmethod
    def submitBinary() -> str:
        """
        Return the name of the command used to submit jobs.

        Returns:
            str: Name of the submission command.
        """
        raise NotImplementedError(
            "submitBinary method is not implemented for this grid engine implementation"
        )

    @classmethod
    def isAvailable(cls) -> bool:
        """
        Determine whether the grid engine is available on the current host.

        Returns:
            bool: True if the submission command is on PATH, False otherwise.
        """
        return shutil.which(cls.submitBinary()) is not None

    @staticmethod
    def getHeaderToken() -> str:
        """
        Return the prefix marking directive lines inside a job script.

        Returns:
            str: The directive prefix.
        """
        raise NotImplementedError(
            "getHeaderToken method is not implemented for this grid engine implementation"
        )

    @staticmethod
    def getDirectives(res: TaskResources) -> list[Directive]:
        """
        Build the ordered list of submission directives for a task.

        Args:
            res (TaskResources): Resources requested for the task.

        Returns:
            list[Directive]: Directives in the order they must appear in the script header.
        """
        raise NotImplementedError(
            "getDirectives method is not implemented for this grid engine implementation"
        )

    @classmethod
    def getHeaders(
        cls, res: TaskResources, cluster_options: str | list[str] | None = None
    ) -> str:
        """
        Render the directives for a task as script header lines.

        Each directive is written on its own line prefixed by the header token.
        Raw cluster options, if provided, are appended as the last line.

        Args:
            res (TaskResources): Resources requested for the task.
            cluster_options (str | list[str] | None): Raw scheduler options added verbatim.

        Returns:
            str: The header, one newline-terminated line per directive.
        """
        token = cls.getHeaderToken()
        lines = [f"{token} {directive}" for directive in cls.getDirectives(res)]

        if isinstance(cluster_options, list):
            cluster_options = " ".join(cluster_options)
        if cluster_options:
            lines.append(f"{token} {cluster_options}")

        logger.debug(f"Rendered {len(lines)} header lines for job '{res.job_name}'.")

        return "".join(f"{line}\n" for line in lines)

    @staticmethod
    def translateSubmit(use_piped_launcher: bool, script_name: str) -> list[str]:
        """
        Build the submission command line.

        Args:
            use_piped_launcher (bool): Whether the script is streamed to the command's stdin.
            script_name (str): Name of the script file to submit.

        Returns:
            list[str]: Tokens of the submission command.
        """
        raise NotImplementedError(
            "translateSubmit method is not implemented for this grid engine implementation"
        )

    @staticmethod
    def getSubmitCommandLine(script: Path, use_piped_launcher: bool) -> list[str]:
        """
        Prepare the script for submission and build the submission command line.

        Args:
            script (Path): Path to the script to submit.
            use_piped_launcher (bool): Whether the script is streamed to the command's stdin.

        Returns:
            list[str]: Tokens of the submission command.

        Raises:
            QSGEError: If the script could not be prepared.
        """
        raise NotImplementedError(
            "getSubmitCommandLine method is not implemented for this grid engine implementation"
        )

    @staticmethod
    def parseJobId(text: str) -> str:
        """
        Extract the job ID from the output of the submission command.

        Args:
            text (str): Standard output of the submission command.

        Returns:
            str: The job ID.

        Raises:
            InvalidSubmitResponse: If the output does not contain a job ID.
        """
        raise NotImplementedError(
            "parseJobId method is not implemented for this grid engine implementation"
        )

    @staticmethod
    def getKillCommand() -> list[str]:
        """
        Return the command used to delete jobs. Job IDs are appended by the caller.

        Returns:
            list[str]: Tokens of the kill command.
        """
        raise NotImplementedError(
            "getKillCommand method is not implemented for this grid engine implementation"
        )

    @staticmethod
    def queueStatusCommand(queue: str | None = None) -> list[str]:
        """
        Return the command used to list the jobs in the queue.

        Args:
            queue (str | None): Name of the queue the caller is interested in.

        Returns:
            list[str]: Tokens of the status command.
        """
        raise NotImplementedError(
            "queueStatusCommand method is not implemented for this grid engine implementation"
        )

    @staticmethod
    def parseQueueStatus(text: str | None) -> dict[str, QueueStatus]:
        """
        Parse the output of the status command into a queue snapshot.

        Args:
            text (str | None): Standard output of the status command.

        Returns:
            dict[str, QueueStatus]: Mapping of job IDs to their states, in listing order.
        """
        raise NotImplementedError(
            "parseQueueStatus method is not implemented for this grid engine implementation"
        )

    @staticmethod
    def quote(path: Path | str) -> str:
        """
        Quote a path so that it can be used inside a directive.

        Args:
            path (Path | str): The path to quote.

        Returns:
            str: The quoted path.
        """
        raise NotImplementedError(
            "quote method is not implemented for this grid engine implementation"
        )
