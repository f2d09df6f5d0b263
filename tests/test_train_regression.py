from pathlib import Path

import pytest

from methopts.train_regression import load_dataset, main, resolve_output_path


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_load_dataset_skips_header_and_short_rows(tmp_path):
    data = _write(
        tmp_path / "data.tsv",
        "x1\tx2\ty\n1\t2\t8\n3\t4\n5\t6\t28\n",
    )
    features, targets = load_dataset(data)
    assert features == [[1.0, 2.0], [5.0, 6.0]]
    assert targets == [8.0, 28.0]


def test_load_dataset_warns_on_invalid_row(tmp_path, capsys):
    data = _write(tmp_path / "data.tsv", "h\nabc\t1\t2\n1\t1\t2\n")
    features, targets = load_dataset(data)
    assert features == [[1.0, 1.0]]
    assert targets == [2.0]
    assert "skipping invalid row: abc\t1\t2" in capsys.readouterr().err


def test_load_dataset_accepts_numeric_prefix(tmp_path):
    data = _write(tmp_path / "data.tsv", "h\n1.5abc\t2\t3.0\r\n")
    features, targets = load_dataset(data)
    assert features == [[1.5, 2.0]]
    assert targets == [3.0]


def test_load_dataset_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_dataset(tmp_path / "missing.tsv")


def test_resolve_existing_directory(tmp_path):
    assert resolve_output_path(tmp_path) == tmp_path / "beta.txt"


def test_resolve_file_with_extension(tmp_path):
    target = tmp_path / "coeffs.txt"
    assert resolve_output_path(target) == target


def test_resolve_missing_directory_without_extension(tmp_path):
    target = tmp_path / "results"
    assert resolve_output_path(target) == target / "beta.txt"


def test_main_requires_two_arguments(capsys):
    assert main(["only-one"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_data_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.tsv"), str(tmp_path)]) == 1
    assert "Failed to open data file" in capsys.readouterr().err


def test_main_with_no_rows(tmp_path, capsys):
    data = _write(tmp_path / "data.tsv", "x1\tx2\ty\n")
    assert main([str(data), str(tmp_path / "out")]) == 1
    captured = capsys.readouterr()
    assert "Loaded 0 samples." in captured.out
    assert "No data loaded" in captured.err


def test_main_writes_coefficients(tmp_path, capsys):
    data = _write(
        tmp_path / "data.tsv",
        "x1\tx2\ty\n1\t2\t8\n2\t1\t7\n3\t0\t6\n0\t1\t3\n",
    )
    out_dir = tmp_path / "nested" / "output"
    assert main([str(data), str(out_dir)]) == 0

    beta_file = out_dir / "beta.txt"
    lines = beta_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    values = [float(v) for v in lines]
    assert all(-10.0 <= v <= 10.0 for v in values)

    out = capsys.readouterr().out
    assert "Loaded 4 samples." in out
    assert f"  beta[0] = {lines[0]}" in out
    assert f"  beta[1] = {lines[1]}" in out
    assert f'Saved beta to "{beta_file}"' in out