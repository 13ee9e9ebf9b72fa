import json
import logging

from click.testing import CliRunner
from rich.logging import RichHandler

from cli.main import cli
from treepath.annotate import TRACE_LOGGER_NAME


def _invoke(args):
    runner = CliRunner()
    return runner.invoke(cli, args)


def test_find_command_reports_found_path():
    result = _invoke(["find", "--tree", "example", "--ids", "4,1,3"])

    assert result.exit_code == 0, result.output
    assert result.exception is None
    assert "Path Search Configuration" in result.output
    assert "Path Found" in result.output
    assert "Matched Path" in result.output


def test_find_command_uses_bundle_default_pool():
    result = _invoke(["find", "--tree", "catalog"])

    assert result.exit_code == 0, result.output
    assert "Gaming" in result.output


def test_find_command_exits_with_one_when_no_path():
    result = _invoke(["find", "--ids", "1,2,4"])

    assert result.exit_code == 1, result.output
    assert "No Path Found" in result.output


def test_find_command_summarises_several_pools():
    result = _invoke(["find", "-t", "two-roots", "-i", "20,21;10;21"])

    assert result.exit_code == 1, result.output
    assert "Summary for two-roots (3 pools)" in result.output


def test_find_command_with_tracers_and_tree_view():
    for tracer in ["none", "logging", "rich", "recording"]:
        result = _invoke(["find", "--ids", "4,1,3", "--tracer", tracer, "-vt"])
        assert result.exit_code == 0, result.output
        assert "Traceback (most recent call last)" not in result.output

    result = _invoke(["find", "--ids", "4,1,3", "--tracer", "rich"])
    assert "ok 4" in result.output


def test_find_command_logging_tracer_does_not_duplicate_lines():
    _invoke(["find", "--ids", "4,1,3", "--tracer", "logging"])
    result = _invoke(["find", "--ids", "4,1,3", "--tracer", "logging"])

    trace_logger = logging.getLogger(TRACE_LOGGER_NAME)
    assert result.exit_code == 0, result.output
    assert trace_logger.propagate is False
    assert sum(isinstance(h, RichHandler) for h in trace_logger.handlers) == 1


def test_find_command_reads_tree_file_with_custom_keys(tmp_path):
    tree_file = tmp_path / "tree.json"
    tree_file.write_text(
        json.dumps({"roots": [{"key": 1, "name": "Top", "kids": [{"key": 2, "name": "Low"}]}]}),
        encoding="utf-8",
    )

    result = _invoke(
        ["find", "-f", str(tree_file), "-ck", "kids", "-ik", "key", "-i", "2,1"]
    )

    assert result.exit_code == 0, result.output
    assert "2 (Low)" in result.output


def test_find_command_rejects_bad_input(tmp_path):
    bad_ids = _invoke(["find", "--ids", "1,x"])
    missing_file = _invoke(["find", "--tree_file", str(tmp_path / "none.json"), "--ids", "1"])
    tree_file = tmp_path / "tree.json"
    tree_file.write_text("[]", encoding="utf-8")
    no_ids = _invoke(["find", "--tree_file", str(tree_file)])

    assert bad_ids.exit_code == 2
    assert "Invalid id pool" in bad_ids.output
    assert missing_file.exit_code == 2
    assert no_ids.exit_code == 2
    assert "No id pool given" in no_ids.output


def test_find_command_rejects_undecodable_tree_file(tmp_path):
    tree_file = tmp_path / "tree.json"
    tree_file.write_bytes(b'[{"id": 1, "name": "\xff"}]')

    result = _invoke(["find", "-f", str(tree_file), "-i", "1"])

    assert result.exit_code == 2
    assert "not UTF-8" in result.output


def test_find_command_rejects_pool_without_ids():
    for ids in [",", "1;,"]:
        result = _invoke(["find", "--ids", ids])
        assert result.exit_code == 2, result.output
        assert "Invalid id pool" in result.output


def test_show_command_prints_tree():
    result = _invoke(["show", "--tree", "catalog", "--max_depth", "1"])

    assert result.exit_code == 0, result.output
    assert "Electronics" in result.output
    assert "Computers" in result.output
    assert "Gaming" not in result.output
