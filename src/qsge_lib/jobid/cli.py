# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from typing import NoReturn, TextIO

import click
from click_help_colors import HelpColorsCommand

from qsge_lib.batch.sge import SGE
from qsge_lib.core.config import CFG
from qsge_lib.core.error import QSGEError
from qsge_lib.core.logger import get_logger

logger = get_logger(__name__)


@click.command(
    short_help="Extract the job ID from the output of qsub.",
    help=f"""Extract the job ID from the output of `{SGE.submitBinary()}`.

{click.style("FILE", fg="green")}   File containing the output of `{SGE.submitBinary()}`. Reads standard input if not specified.

Both the terse output (a bare job ID) and the verbose output
(`Your job <id> ("<name>") has been submitted`) are recognized.
Only the last non-empty line of the output is considered.""",
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
def jobid(file: TextIO) -> NoReturn:
    try:
        print(SGE.parseJobId(file.read()))
        sys.exit(0)
    except QSGEError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)
