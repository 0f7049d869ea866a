"""
Tests for the command line entry point.
"""

import os
import tempfile
from unittest.mock import patch

import pytest

import main

CATALOG = (
    "ProductName,Price,Category,InStock\n"
    "A,200,Tech,true\n"
    "B,80,Tech,true\n"
    "C,150,Home,false\n"
    "D,500,Home,true\n"
)


@pytest.fixture
def workspace():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep tests from attaching a log file handler."""
    with patch("main.setup_logging"):
        yield


def write_catalog(directory, content):
    path = os.path.join(directory, "products.csv")
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path


def test_parser_defaults():
    """Test CLI defaults match the settings module."""
    args = main.build_parser().parse_args([])

    assert args.min_price == 0.0
    assert args.top == 5
    assert args.scope == "all"
    assert args.write_rejected_log is True


def test_parser_aliases():
    """Test short flags and the camelCase min price alias."""
    args = main.build_parser().parse_args(["-m", "50", "-t", "3"])
    assert args.min_price == 50.0
    assert args.top == 3

    args = main.build_parser().parse_args(["--minPrice", "12.5", "--no-rejected-log"])
    assert args.min_price == 12.5
    assert args.write_rejected_log is False


@pytest.mark.parametrize("value", ["nan", "inf", "-inf", "cheap"])
def test_parser_rejects_non_finite_min_price(value, capsys):
    """Test thresholds must be finite numbers."""
    with pytest.raises(SystemExit) as exc_info:
        main.build_parser().parse_args(["--min-price", value])

    assert exc_info.value.code == 2
    assert "--min-price" in capsys.readouterr().err


def test_parser_rejects_unknown_scope():
    """Test --scope only accepts known values."""
    with pytest.raises(SystemExit):
        main.build_parser().parse_args(["--scope", "some"])


def test_successful_run(workspace, capsys):
    """Test a full run prints tables and lists saved reports."""
    input_path = write_catalog(workspace, CATALOG)
    output_dir = os.path.join(workspace, "reports")

    code = main.main(["-i", input_path, "-m", "100", "-t", "2", "-o", output_dir])

    out = capsys.readouterr().out
    assert code == 0
    assert "In-stock products > 100:" in out
    assert "Top 2 most expensive products:" in out
    assert "Reports saved:" in out
    assert os.path.exists(os.path.join(output_dir, "summary_report.html"))


def test_empty_result_exit_code(workspace, capsys):
    """Test zero valid rows exits with 1 and writes nothing."""
    input_path = write_catalog(workspace, "ProductName,Price,Category,InStock\n,1,X,true\n")
    output_dir = os.path.join(workspace, "reports")

    code = main.main(["-i", input_path, "-o", output_dir])

    assert code == 1
    assert "No reports written" in capsys.readouterr().out
    assert not os.path.exists(output_dir)


def test_missing_source_exit_code(workspace, capsys):
    """Test an unreadable source exits with 1."""
    code = main.main(["-i", os.path.join(workspace, "missing.csv"),
                      "-o", os.path.join(workspace, "reports")])

    assert code == 1
    assert "Error reading catalog" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
