# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

# ruff: noqa: W291

import dataclasses
import stat
from datetime import timedelta
from pathlib import Path
from unittest.mock import patch

import pytest

from qsge_lib.batch.interface import Directive
from qsge_lib.batch.sge import SGE
from qsge_lib.core.config import Config
from qsge_lib.core.error import InvalidSubmitResponse, QSGEError
from qsge_lib.properties.resources import TaskResources
from qsge_lib.properties.size import Size
from qsge_lib.properties.states import QueueStatus


@pytest.fixture
def resources():
    return TaskResources(
        job_name="nf-align_1",
        work_dir=Path("/work/ab/cdef"),
        log_file_name=".command.log",
        queue="long.q",
        penv="smp",
        ncpus=4,
        walltime=timedelta(hours=100, minutes=5, seconds=7),
        mem=Size(8, "gb"),
    )


@pytest.fixture
def full_directives():
    return [
        Directive("-N", "nf-align_1"),
        Directive("-o", "/work/ab/cdef/.command.log"),
        Directive("-j", "y"),
        Directive("-q", "long.q"),
        Directive("-pe", "smp 4"),
        Directive("-l", "walltime=100:05:07"),
        Directive("-l", "mem=8G"),
        Directive("-V"),
    ]


def test_env_name():
    assert SGE.envName() == "SGE"


def test_is_available():
    with patch("shutil.which", return_value="/opt/sge/bin/qsub") as mock_which:
        assert SGE.isAvailable()
        mock_which.assert_called_once_with("qsub")


def test_is_not_available():
    with patch("shutil.which", return_value=None):
        assert not SGE.isAvailable()


def test_header_token():
    assert SGE.getHeaderToken() == "#$"


def test_get_directives_all_fields(resources, full_directives):
    assert SGE.getDirectives(resources) == full_directives


@pytest.mark.parametrize(
    "field, removed",
    [
        ("queue", Directive("-q", "long.q")),
        ("walltime", Directive("-l", "walltime=100:05:07")),
        ("mem", Directive("-l", "mem=8G")),
    ],
)
def test_get_directives_omitting_optional_field(
    resources, full_directives, field, removed
):
    res = dataclasses.replace(resources, **{field: None})

    expected = [d for d in full_directives if d != removed]
    assert SGE.getDirectives(res) == expected


def test_get_directives_without_penv_requests_cpus(resources, full_directives):
    res = dataclasses.replace(resources, penv=None)

    expected = [
        Directive("-l", "cpu=4") if d.flag == "-pe" else d for d in full_directives
    ]
    assert SGE.getDirectives(res) == expected


def test_get_directives_minimal():
    res = TaskResources(
        job_name="job", work_dir=Path("/work"), log_file_name=".command.log"
    )

    assert SGE.getDirectives(res) == [
        Directive("-N", "job"),
        Directive("-o", "/work/.command.log"),
        Directive("-j", "y"),
        Directive("-l", "cpu=1"),
        Directive("-V"),
    ]


@pytest.mark.parametrize("penv", [None, "smp", "mpi"])
@pytest.mark.parametrize("ncpus", [1, 2, 64])
def test_get_directives_slots_mutually_exclusive(penv, ncpus):
    res = TaskResources(job_name="job", work_dir=Path("/w"), penv=penv, ncpus=ncpus)
    directives = SGE.getDirectives(res)

    pe = [d for d in directives if d.flag == "-pe"]
    cpu = [d for d in directives if d.flag == "-l" and d.value.startswith("cpu=")]

    assert len(pe) + len(cpu) == 1
    if penv:
        assert pe == [Directive("-pe", f"{penv} {ncpus}")]
    else:
        assert cpu == [Directive("-l", f"cpu={ncpus}")]


def test_get_directives_quotes_log_path_with_blanks():
    res = TaskResources(
        job_name="job", work_dir=Path("/my work/dir"), log_file_name=".command.log"
    )

    assert SGE.getDirectives(res)[1] == Directive(
        "-o", '"/my work/dir/.command.log"'
    )


@pytest.mark.parametrize(
    "mem, expected",
    [
        (Size(1, "gb"), "mem=1G"),
        (Size(1536, "mb"), "mem=1G"),
        (Size(512, "mb"), "mem=0G"),
        (Size(1, "tb"), "mem=1024G"),
    ],
)
def test_get_directives_memory_in_whole_gigabytes(mem, expected):
    res = TaskResources(job_name="job", work_dir=Path("/w"), mem=mem)
    assert Directive("-l", expected) in SGE.getDirectives(res)


@pytest.mark.parametrize(
    "walltime, expected",
    [
        (timedelta(minutes=30), "walltime=00:30:00"),
        (timedelta(hours=23, minutes=59, seconds=59), "walltime=23:59:59"),
        (timedelta(days=2), "walltime=48:00:00"),
    ],
)
def test_get_directives_walltime_format(walltime, expected):
    res = TaskResources(job_name="job", work_dir=Path("/w"), walltime=walltime)
    assert Directive("-l", expected) in SGE.getDirectives(res)


def test_get_directives_never_adds_terse(resources):
    assert all(d.flag != "-terse" for d in SGE.getDirectives(resources))


def test_get_headers(resources):
    assert SGE.getHeaders(resources) == (
        "#$ -N nf-align_1\n"
        "#$ -o /work/ab/cdef/.command.log\n"
        "#$ -j y\n"
        "#$ -q long.q\n"
        "#$ -pe smp 4\n"
        "#$ -l walltime=100:05:07\n"
        "#$ -l mem=8G\n"
        "#$ -V\n"
    )


def test_get_headers_with_cluster_options_string(resources):
    headers = SGE.getHeaders(resources, "-P project -l h_vmem=4G")
    assert headers.endswith("#$ -V\n#$ -P project -l h_vmem=4G\n")


def test_get_headers_with_cluster_options_list(resources):
    headers = SGE.getHeaders(resources, ["-P", "project"])
    assert headers.endswith("#$ -V\n#$ -P project\n")


@pytest.mark.parametrize("options", [None, "", []])
def test_get_headers_without_cluster_options(resources, options):
    assert SGE.getHeaders(resources, options) == SGE.getHeaders(resources)
    assert SGE.getHeaders(resources, options).endswith("#$ -V\n")


def test_translate_submit_piped():
    assert SGE.translateSubmit(True, "x.sh") == ["qsub", "-"]


def test_translate_submit_file():
    assert SGE.translateSubmit(False, "x.sh") == ["qsub", "-terse", "x.sh"]


def test_get_submit_command_line_sets_permissions(tmp_path):
    script = tmp_path / ".command.run"
    script.write_text("#!/bin/bash\n")
    script.chmod(0o600)

    command = SGE.getSubmitCommandLine(script, use_piped_launcher=False)

    assert command == ["qsub", "-terse", ".command.run"]
    assert stat.S_IMODE(script.stat().st_mode) == 0o755


def test_get_submit_command_line_piped_does_not_touch_script(tmp_path):
    script = tmp_path / ".command.run"

    with patch.object(Path, "chmod") as mock_chmod:
        command = SGE.getSubmitCommandLine(script, use_piped_launcher=True)

    assert command == ["qsub", "-"]
    mock_chmod.assert_not_called()


def test_get_submit_command_line_chmod_failure_raises(tmp_path):
    script = tmp_path / "missing.sh"

    with pytest.raises(QSGEError, match="Could not set permissions"):
        SGE.getSubmitCommandLine(script, use_piped_launcher=False)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12345\n", "12345"),
        ("12345", "12345"),
        ('Your job 98765 ("foo") has been submitted', "98765"),
        ('Your job 98765 ("foo") has been submitted\n\n', "98765"),
        ("warning: job will be rescheduled\n4242\n", "4242"),
        (
            'warning: no access to project\nYour job 7 ("a b") has been submitted\n',
            "7",
        ),
        ("  \n 777 \n\n", "777"),
        ("123456789012345678901234567890", "123456789012345678901234567890"),
        ("000123", "000123"),
        (
            'Your job-array 321.1-10:1 ("arr") has been submitted',
            "321.1-10:1",
        ),
    ],
)
def test_parse_job_id(text, expected):
    assert SGE.parseJobId(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "garbage output",
        "",
        "   \n  \n",
        "-5",
        "+5",
        "12 34",
        "4242\nwarning: something went wrong",
        "Your job 98765 was rejected",
        "Unable to run job: job rejected. Your job has",
    ],
)
def test_parse_job_id_invalid(text):
    with pytest.raises(InvalidSubmitResponse) as exc_info:
        SGE.parseJobId(text)

    assert exc_info.value.raw_text == text


def test_fixed_commands_ignore_config_file(tmp_path, monkeypatch):
    (tmp_path / "qsge_config.toml").write_text(
        "[sge_options]\n"
        'submit = "sbatch"\n'
        'status = "squeue"\n'
        'kill = "scancel"\n'
        'header_token = "#SBATCH"\n'
        'script_mode = "755"\n'
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("QSGE_CONFIG", raising=False)
    monkeypatch.setattr("qsge_lib.core.config.CFG", Config.load())

    script = tmp_path / "job.sh"
    script.write_text("#!/bin/bash\n")
    script.chmod(0o600)

    assert SGE.submitBinary() == "qsub"
    assert SGE.getKillCommand() == ["qdel"]
    assert SGE.queueStatusCommand() == ["qstat"]
    assert SGE.getHeaderToken() == "#$"
    assert SGE.getSubmitCommandLine(script, use_piped_launcher=False) == [
        "qsub",
        "-terse",
        "job.sh",
    ]
    assert stat.S_IMODE(script.stat().st_mode) == 0o755


def test_get_kill_command():
    assert SGE.getKillCommand() == ["qdel"]


def test_get_kill_command_returns_fresh_list():
    command = SGE.getKillCommand()
    command.append("123")

    assert SGE.getKillCommand() == ["qdel"]


@pytest.mark.parametrize("queue", [None, "", "all.q"])
def test_queue_status_command_ignores_queue(queue):
    assert SGE.queueStatusCommand(queue) == ["qstat"]


QSTAT_OUTPUT = """job-ID  prior   name       user         state submit/start at     queue                          slots ja-task-ID
-----------------------------------------------------------------------------------------------------------------
    101 0.55500 job1       alice        r     10/18/2026 10:00:00 all.q@node01                       1
    102 0.00000 job2       alice        qw    10/18/2026 10:01:00                                    1
    103 0.00000 job3       alice        Eqw   10/18/2026 10:02:00                                    1
    104 0.00000 job4       alice        hqw   10/18/2026 10:02:00                                    4
    105 0.55500 job5       alice        dr    10/18/2026 10:03:00 all.q@node02                       1
"""


def test_parse_queue_status():
    snapshot = SGE.parseQueueStatus(QSTAT_OUTPUT)

    assert snapshot == {
        "101": QueueStatus.RUNNING,
        "102": QueueStatus.PENDING,
        "103": QueueStatus.ERROR,
        "104": QueueStatus.HOLD,
        "105": QueueStatus.UNKNOWN,
    }
    assert list(snapshot) == ["101", "102", "103", "104", "105"]


def test_parse_queue_status_single_pending_row():
    text = "header\n------\n 42 0.0 name user qw 10/18/2026 10:00:00 1\n"
    assert SGE.parseQueueStatus(text) == {"42": QueueStatus.PENDING}


def test_parse_queue_status_drops_short_rows():
    text = "header\n------\n 42 0.0 name user\n 43 0.0 name user r 10/18/2026\n"
    assert SGE.parseQueueStatus(text) == {"43": QueueStatus.RUNNING}


def test_parse_queue_status_skips_first_two_lines_unconditionally():
    text = "1 0.0 a u r x\n2 0.0 a u r x\n3 0.0 a u qw x\n"
    assert SGE.parseQueueStatus(text) == {"3": QueueStatus.PENDING}


def test_parse_queue_status_duplicates_keep_first_position():
    text = (
        "header\n------\n"
        "1 0.0 a u qw x\n"
        "2 0.0 b u r x\n"
        "1 0.0 a u r x\n"
    )
    snapshot = SGE.parseQueueStatus(text)

    assert snapshot == {"1": QueueStatus.RUNNING, "2": QueueStatus.RUNNING}
    assert list(snapshot) == ["1", "2"]


@pytest.mark.parametrize("text", [None, "", "header\n------\n", "header\n"])
def test_parse_queue_status_empty(text):
    assert SGE.parseQueueStatus(text) == {}


def test_parse_queue_status_returns_fresh_snapshot():
    first = SGE.parseQueueStatus(QSTAT_OUTPUT)
    first["999"] = QueueStatus.RUNNING

    assert "999" not in SGE.parseQueueStatus(QSTAT_OUTPUT)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/work/ab/cd", "/work/ab/cd"),
        (Path("/work/ab/cd/.command.log"), "/work/ab/cd/.command.log"),
        ("/my work/dir", '"/my work/dir"'),
        (Path("/my work/dir"), '"/my work/dir"'),
        ("C:\\my dir\\x", '"C:\\my dir\\x"'),
        ("C:\\dir\\x", "C:\\dir\\x"),
        ('/a"b', '/a"b'),
        ("/a\tb", "/a\tb"),
    ],
)
def test_quote(path, expected):
    assert SGE.quote(path) == expected


@pytest.mark.parametrize("path", ["/work/ab", "relative/x", "C:\\dir"])
def test_quote_idempotent_without_blanks(path):
    assert SGE.quote(SGE.quote(path)) == SGE.quote(path)
