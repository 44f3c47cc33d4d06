# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand

from qsge_lib.batch.sge import SGE
from qsge_lib.core.config import CFG
from qsge_lib.core.logger import get_logger

logger = get_logger(__name__)


@click.command(
    short_help="Print the qdel command for jobs.",
    help=f"""Print the `{SGE.getKillCommand()[0]}` command line terminating the specified jobs.

{click.style("JOB_ID", fg="green")}   Identifiers of the jobs to terminate.""",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
@click.argument(
    "job_ids",
    type=str,
    nargs=-1,
    required=True,
    metavar=click.style("JOB_ID...", fg="green"),
)
def kill(job_ids: tuple[str, ...]) -> NoReturn:
    try:
        command = SGE.getKillCommand() + list(job_ids)
        logger.debug(command)
        print(" ".join(command))
        sys.exit(0)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)
