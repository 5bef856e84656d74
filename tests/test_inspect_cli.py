# tests/test_inspect_cli.py

"""Tests for the structure inspection command line."""

import io
import shutil

from laurel.presentation.cli.inspect_structure import inspect, main, setup_parser


def test_parser_defaults():
    args = setup_parser().parse_args(["a.gro"])
    assert args.paths == ["a.gro"]
    assert not args.center
    assert not args.verbose
    assert args.log_file is None


def test_inspect_single_file(data_dir):
    out = io.StringIO()
    code = inspect([str(data_dir / "water.gro")], out=out)

    assert code == 0
    text = out.getvalue()
    assert "Structure loaded: 'Two SPC waters t= 0.00000'" in text
    assert "n_atoms: 6" in text
    assert "centered" not in text


def test_inspect_with_centering(data_dir):
    out = io.StringIO()
    code = inspect([str(data_dir / "dodecahedron.gro")], center=True, out=out)

    assert code == 0
    text = out.getvalue()
    assert "center: [2.000, 1.500, 0.250]" in text
    assert "Centering the structure..." in text
    assert "centered: [0.000, 0.000, 0.000]" in text


def test_inspect_directory_reports_failures(data_dir, capsys):
    out = io.StringIO()
    code = inspect([str(data_dir)], out=out)

    assert code == 1
    assert out.getvalue().count("Structure loaded:") == 2
    assert "truncated.gro" in capsys.readouterr().err


def test_main_with_log_file(tmp_path, data_dir):
    shutil.copy(data_dir / "water.gro", tmp_path / "water.gro")
    log_file = tmp_path / "inspect.log"

    code = main([str(tmp_path / "water.gro"), "--log-file", str(log_file)])

    assert code == 0
    assert log_file.exists()


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.gro")]) == 1
