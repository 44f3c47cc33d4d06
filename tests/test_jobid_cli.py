# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from unittest.mock import patch

from click.testing import CliRunner

from qsge_lib.core.config import CFG
from qsge_lib.jobid.cli import jobid


def test_jobid_terse():
    runner = CliRunner()
    result = runner.invoke(jobid, [], input="4711\n")

    assert result.exit_code == 0
    assert result.stdout == "4711\n"


def test_jobid_verbose_with_warnings(tmp_path):
    file = tmp_path / "qsub.out"
    file.write_text('warning: x\nYour job 98765 ("foo") has been submitted\n')

    runner = CliRunner()
    result = runner.invoke(jobid, [str(file)])

    assert result.exit_code == 0
    assert result.stdout == "98765\n"


def test_jobid_invalid_response():
    runner = CliRunner()
    with patch("qsge_lib.jobid.cli.logger.error") as mock_error:
        result = runner.invoke(jobid, [], input="garbage output\n")

    assert result.exit_code == CFG.exit_codes.invalid_submit_response
    mock_error.assert_called_once()
    assert "garbage output" in str(mock_error.call_args.args[0])
