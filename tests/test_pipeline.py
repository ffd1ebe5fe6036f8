import os

import pytest

from pipex.paths import PathNotFoundError
from pipex.pipeline import (
    CommandNotFoundError,
    PipexError,
    main,
    resolve_command,
    run_pipeline,
)

ENV = {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


def _script(path, body):
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(0o755)
    return path


def test_resolve_command_splits_arguments(tmp_path):
    tool = _script(tmp_path / "tool", "exit 0\n")
    path, args = resolve_command("tool -a  -b", {"PATH": str(tmp_path)})
    assert path == str(tool)
    assert args == ["tool", "-a", "-b"]


def test_resolve_command_blank_raises():
    with pytest.raises(CommandNotFoundError) as info:
        resolve_command("    ", ENV)
    assert info.value.exit_status == 127
    assert str(info.value) == "command not found"


def test_resolve_command_unknown_raises(tmp_path):
    with pytest.raises(CommandNotFoundError) as info:
        resolve_command("nothing-here", {"PATH": str(tmp_path)})
    assert info.value.exit_status == 127


def test_resolve_command_without_path_raises():
    with pytest.raises(PathNotFoundError):
        resolve_command("cat", {})


def test_command_not_found_is_pipex_error():
    with pytest.raises(PipexError):
        resolve_command("", ENV)


def test_pipeline_passes_data_through(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    content = "first line\nsecond line\n"
    infile.write_text(content)
    status = run_pipeline(str(infile), "cat", "cat", str(outfile), ENV)
    assert status == 0
    assert outfile.read_text() == content


def test_pipeline_transforms(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("hello\n")
    status = run_pipeline(str(infile), "cat", "tr a-z A-Z", str(outfile), ENV)
    assert status == 0
    assert outfile.read_text() == "HELLO\n"


def test_pipeline_truncates_outfile(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("new")
    outfile.write_text("old content that is much longer")
    run_pipeline(str(infile), "cat", "cat", str(outfile), ENV)
    assert outfile.read_text() == "new"


def test_pipeline_returns_second_status(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("data\n")
    script = _script(tmp_path / "seven", "cat > /dev/null\nexit 7\n")
    status = run_pipeline(str(infile), "cat", str(script), str(tmp_path / "out"), ENV)
    assert status == 7


def test_pipeline_missing_infile(tmp_path, capsys):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(tmp_path / "absent"), "cat", "cat", str(outfile), ENV)
    assert status == 0
    assert outfile.read_text() == ""
    assert "open infile error" in capsys.readouterr().err


def test_pipeline_second_command_not_found(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    infile.write_text("data\n")
    status = run_pipeline(str(infile), "cat", "nothing-here", str(tmp_path / "out"), ENV)
    assert status == 127
    assert "command not found" in capsys.readouterr().err


def test_pipeline_first_command_not_found(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("data\n")
    status = run_pipeline(str(infile), "nothing-here", "cat", str(outfile), ENV)
    assert status == 0
    assert outfile.read_text() == ""
    assert "command not found" in capsys.readouterr().err


def test_pipeline_bad_outfile(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    infile.write_text("data\n")
    target = tmp_path / "missing-dir" / "out.txt"
    status = run_pipeline(str(infile), "cat", "cat", str(target), ENV)
    assert status == 1
    assert "open outfile error" in capsys.readouterr().err


def test_pipeline_without_path(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    infile.write_text("data\n")
    status = run_pipeline(str(infile), "cat", "cat", str(tmp_path / "out"), {})
    assert status == 1
    assert "Error: path not found" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [[], ["a", "b", "c"], ["a", "b", "c", "d", "e"], ["in", "", "cat", "out"], ["in", "cat", "", "out"]],
)
def test_main_rejects_bad_arguments(argv, capsys):
    assert main(argv) == 1
    assert "error : arguments" in capsys.readouterr().err


def test_main_runs_pipeline(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    content = "one\ntwo\n"
    infile.write_text(content)
    assert main([str(infile), "cat", "cat", str(outfile)]) == 0
    assert outfile.read_text() == content