# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from pathlib import Path
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand
from click_option_group import optgroup

from qsge_lib.batch.sge import SGE
from qsge_lib.core.config import CFG
from qsge_lib.core.error import QSGEError
from qsge_lib.core.logger import get_logger
from qsge_lib.properties.resources import LOG_FILE_NAME, TaskResources

logger = get_logger(__name__)


@click.command(
    short_help="Print the SGE directives for a task.",
    help=f"""Print the `{SGE.getHeaderToken()}` directive header of an SGE job script for the requested resources.

The directives are printed in the order in which SGE has to read them.
The merged standard output and error of the task are written into
`<work-dir>/{LOG_FILE_NAME}`.""",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
@optgroup.group(f"{click.style('General settings', fg='yellow')}")
@optgroup.option("--name", "-N", type=str, required=True, help="Name of the job.")
@optgroup.option(
    "--work-dir",
    type=click.Path(path_type=Path),
    default=None,
    help="Working directory of the task. Defaults to the current directory.",
)
@optgroup.option(
    "--queue",
    "-q",
    type=str,
    default=None,
    help="Name of the queue to submit the job to.",
)
@optgroup.option(
    "--cluster-options",
    type=str,
    default=None,
    help="Raw scheduler options appended verbatim after the generated directives.",
)
@optgroup.group(f"{click.style('Requested resources', fg='yellow')}")
@optgroup.option(
    "--ncpus",
    type=int,
    default=None,
    help="Number of CPU cores (slots) to allocate for the job. Defaults to 1.",
)
@optgroup.option(
    "--penv",
    type=str,
    default=None,
    help="Parallel environment to request the CPU cores from (e.g., smp).",
)
@optgroup.option(
    "--walltime",
    type=str,
    default=None,
    help="Maximum runtime of the job. Specify as 'HH:MM:SS' or e.g. '1d', '2h30m'.",
)
@optgroup.option(
    "--mem",
    type=str,
    default=None,
    help="Memory to allocate for the job. Specify as 'Ngb' (e.g., 4gb). Rounded down to whole gigabytes.",
)
def header(
    name: str,
    work_dir: Path | None,
    queue: str | None,
    cluster_options: str | None,
    ncpus: int | None,
    penv: str | None,
    walltime: str | None,
    mem: str | None,
) -> NoReturn:
    try:
        res = TaskResources.fromStrings(
            job_name=name,
            work_dir=work_dir or Path.cwd(),
            queue=queue,
            penv=penv,
            ncpus=ncpus,
            walltime=walltime,
            mem=mem,
        )
        print(SGE.getHeaders(res, cluster_options), end="")
        sys.exit(0)
    except QSGEError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)
