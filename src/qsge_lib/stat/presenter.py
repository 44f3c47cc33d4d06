# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections import Counter

import yaml
from rich.console import Console, Group
from rich.text import Text
from tabulate import Line, TableFormat, tabulate

from qsge_lib.core.common import load_yaml_dumper
from qsge_lib.core.config import CFG
from qsge_lib.properties.states import QueueStatus

Dumper: type[yaml.Dumper] = load_yaml_dumper()


class StatPresenter:
    """
    Present the states of jobs collected from one SGE status query.
    """

    # Table formatting configuration for `tabulate`.
    _COMPACT_TABLE = TableFormat(
        lineabove=Line("", "", "", ""),
        linebelowheader="",
        linebetweenrows="",
        linebelow=Line("", "", "", ""),
        headerrow=("", "  ", ""),
        datarow=("", "  ", ""),
        padding=0,
        with_header_hide=["lineabove", "linebelow"],
    )

    def __init__(self, snapshot: dict[str, QueueStatus]):
        """
        Initialize the presenter with a queue snapshot.

        Args:
            snapshot (dict[str, QueueStatus]): Mapping of job IDs to their states.
        """
        self._snapshot = snapshot

    def createStatusTable(self) -> Group:
        """
        Create a Rich renderable listing all jobs and a summary of their states.

        Returns:
            Group: Rich Group containing the jobs table and the summary line.
        """
        rows = [
            [Text(job_id, style=CFG.stat_presenter.main_style), self._stateText(state)]
            for job_id, state in self._snapshot.items()
        ]

        # render the cells to ANSI so that tabulate can align them
        table = tabulate(
            [[self._toAnsi(cell) for cell in row] for row in rows],
            headers=[
                self._toAnsi(Text(h, style=CFG.stat_presenter.headers_style))
                for h in ("Job ID", "State")
            ],
            tablefmt=StatPresenter._COMPACT_TABLE,
            stralign="left",
            disable_numparse=True,
        )

        return Group(Text.from_ansi(table), Text(""), self.createSummary())

    def createSummary(self) -> Text:
        """
        Create a line with the number of jobs in each state.

        Returns:
            Text: Counts of jobs per state followed by the total count.
        """
        counts = Counter(self._snapshot.values())

        summary = Text()
        for state in QueueStatus:
            if counts[state]:
                summary.append(f"{state} ", style=CFG.stat_presenter.secondary_style)
                summary.append(f"{counts[state]}  ", style=state.color)

        summary.append(
            f"{CFG.stat_presenter.sum_jobs_code} {len(self._snapshot)}",
            style=CFG.stat_presenter.secondary_style,
        )
        return summary

    def dumpYaml(self) -> str:
        """
        Return the YAML representation of the snapshot.

        Returns:
            str: Mapping of job IDs to lowercase state names.
        """
        return yaml.dump(
            {job_id: str(state) for job_id, state in self._snapshot.items()},
            Dumper=Dumper,
            default_flow_style=False,
            sort_keys=False,
        )

    @staticmethod
    def _stateText(state: QueueStatus) -> Text:
        return Text(str(state), style=state.color)

    @staticmethod
    def _toAnsi(text: Text) -> str:
        """Render Rich Text into a string with ANSI escape codes."""
        console = Console(force_terminal=True, color_system="standard", width=1000)
        with console.capture() as capture:
            console.print(text, end="")
        return capture.get()
