# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from pathlib import Path
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand

from qsge_lib.batch.sge import SGE
from qsge_lib.core.config import CFG
from qsge_lib.core.error import QSGEError
from qsge_lib.core.logger import get_logger

logger = get_logger(__name__)


@click.command(
    short_help="Prepare a script and print the qsub command.",
    help=f"""Print the `{SGE.submitBinary()}` command line used to submit a job script.

{click.style("SCRIPT", fg="green")}   Path to the script to submit.

Unless `--pipe` is used, the permissions of the script are set to rwxr-xr-x
so that the scheduler is able to execute it. The command is only printed, it is not executed.""",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
@click.argument(
    "script",
    type=click.Path(path_type=Path),
    metavar=click.style("SCRIPT", fg="green"),
)
@click.option(
    "--pipe",
    is_flag=True,
    help="The script will be streamed to the standard input of the submission command.",
)
def submit(script: Path, pipe: bool) -> NoReturn:
    try:
        if not pipe and not script.is_file():
            raise QSGEError(f"Script '{script}' does not exist or is not a file.")

        print(" ".join(SGE.getSubmitCommandLine(script, pipe)))
        sys.exit(0)
    except QSGEError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)
