# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from typing import NoReturn, TextIO

import click
from click_help_colors import HelpColorsCommand
from rich.console import Console

from qsge_lib.batch.sge import SGE
from qsge_lib.core.config import CFG
from qsge_lib.core.error import QSGEError
from qsge_lib.core.logger import get_logger
from qsge_lib.stat.presenter import StatPresenter

logger = get_logger(__name__)


@click.command(
    short_help="Decode the output of qstat.",
    help=f"""Decode the job listing printed by `{SGE.queueStatusCommand()[0]}` into job states.

{click.style("FILE", fg="green")}   File containing the output of `{SGE.queueStatusCommand()[0]}`. Reads standard input if not specified.

Jobs whose rows are malformed do not appear in the output. Such jobs have an unknown state,
they are not necessarily finished.

With `--command`, only the status command itself is printed and no input is read.""",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
@click.argument(
    "file",
    type=click.File("r"),
    metavar=click.style("FILE", fg="green"),
    required=False,
    default="-",
)
@click.option("--yaml", is_flag=True, help="Output job states in YAML format.")
@click.option(
    "--command",
    is_flag=True,
    help=f"Print the `{SGE.queueStatusCommand()[0]}` command line and exit.",
)
@click.option(
    "-q",
    "--queue",
    type=str,
    default=None,
    help="Queue of interest. Note that the status listing is never filtered by queue.",
)
def stat(file: TextIO, yaml: bool, command: bool, queue: str | None) -> NoReturn:
    try:
        if command:
            print(" ".join(SGE.queueStatusCommand(queue)))
            sys.exit(0)

        snapshot = SGE.parseQueueStatus(file.read())
        if not snapshot:
            logger.info("No jobs found.")
            sys.exit(0)

        presenter = StatPresenter(snapshot)
        if yaml:
            print(presenter.dumpYaml(), end="")
        else:
            console = Console()
            console.print(presenter.createStatusTable())

        sys.exit(0)
    except QSGEError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)
