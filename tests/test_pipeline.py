import os

from pipexpy.params import USAGE
from pipexpy.pipeline import PipelineFiles, main, open_files, run_pipeline


def _system_paths():
    return [d for d in os.environ.get("PATH", "").split(":") if d]


def test_open_files_missing_input_reads_empty(tmp_path, capsys):
    missing = tmp_path / "missing"
    files = open_files(str(missing), str(tmp_path / "out"))
    try:
        assert files.infile.read() == b""
    finally:
        files.close()
    assert str(missing) in capsys.readouterr().err


def test_open_files_truncates_output(tmp_path):
    infile = tmp_path / "in"
    infile.write_bytes(b"data")
    outfile = tmp_path / "out"
    outfile.write_bytes(b"old contents")
    with open_files(str(infile), str(outfile)) as files:
        assert files.infile.read() == b"data"
    assert outfile.read_bytes() == b""


def test_close_closes_both(tmp_path):
    infile = tmp_path / "in"
    infile.write_bytes(b"")
    files = open_files(str(infile), str(tmp_path / "out"))
    assert isinstance(files, PipelineFiles)
    files.close()
    assert files.infile.closed and files.outfile.closed


def test_run_pipeline_connects_commands(tmp_path):
    infile = tmp_path / "in"
    infile.write_bytes(b"hello\nworld\n")
    outfile = tmp_path / "out"
    with open_files(str(infile), str(outfile)) as files:
        codes = run_pipeline(["cat", "tr a-z A-Z"], files, _system_paths())
    assert codes == [0, 0]
    assert outfile.read_bytes() == b"HELLO\nWORLD\n"


def test_run_pipeline_reports_missing_command(tmp_path, capsys):
    infile = tmp_path / "in"
    infile.write_bytes(b"text\n")
    outfile = tmp_path / "out"
    with open_files(str(infile), str(outfile)) as files:
        codes = run_pipeline(["nosuchcmd_xyz", "cat"], files, _system_paths())
    assert codes == [1, 0]
    assert outfile.read_bytes() == b""
    assert "nosuchcmd_xyz" in capsys.readouterr().err


def test_main_wrong_argument_count(capsys):
    assert main(["a", "b"]) == 0
    assert capsys.readouterr().out.strip() == USAGE


def test_main_empty_argument(tmp_path, capsys):
    assert main(["in", "", "cat", str(tmp_path / "out")]) == 1
    assert USAGE in capsys.readouterr().out


def test_main_runs_pipeline(tmp_path):
    infile = tmp_path / "in"
    infile.write_bytes(b"b\na\n")
    outfile = tmp_path / "out"
    assert main([str(infile), "cat", "sort", str(outfile)]) == 0
    assert outfile.read_bytes() == b"a\nb\n"