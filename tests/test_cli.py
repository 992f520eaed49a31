"""Tests for the command-line interface."""

import io
import json
from unittest.mock import AsyncMock, patch

import pytest

from domain_checker.cli import build_parser, display_report, main
from domain_checker.prober import DomainStatus
from domain_checker.report import build_report, filter_unregistered_only

from .conftest import _capture_console

STATUSES = [
    DomainStatus(
        "example.com",
        registered=True,
        has_nameserver_records=True,
        nameservers=("a.iana-servers.net.",),
        addresses=(),
    ),
    DomainStatus("unused-name.dev"),
    DomainStatus("broken.io", error="NS lookup error: timed out"),
]


@pytest.fixture
def mock_probe_all():
    with patch("domain_checker.cli.probe_all", new_callable=AsyncMock) as m:
        m.return_value = list(STATUSES)
        yield m


def test_parser_defaults():
    args = build_parser().parse_args(["a.com"])
    assert args.domains == ["a.com"]
    assert args.concurrent == 10
    assert args.json is False
    assert args.unregistered_only is False
    assert args.output is None


def test_parser_rejects_zero_concurrency(capsys):
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["a.com", "-c", "0"])
    assert exc_info.value.code == 2


def test_version_argument(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert "domain-checker" in capsys.readouterr().out


def test_text_output(capsys, mock_probe_all):
    assert main(["example.com", "unused-name.dev", "broken.io"]) == 0
    out = capsys.readouterr().out
    assert "Domain: example.com" in out
    assert "a.iana-servers.net." in out
    assert "Error: NS lookup error: timed out" in out
    assert "Total: 3" in out
    assert "Registered: 1" in out
    assert "Unregistered: 2" in out
    assert "Errors: 1" in out


def test_passes_domains_and_limit(mock_probe_all):
    main(["Example.com", "foo.dev", "-c", "3"])
    args, _ = mock_probe_all.call_args
    assert args == (["example.com", "foo.dev"], 3)


def test_json_output(capsys, mock_probe_all):
    assert main(["example.com", "--json"]) == 0
    doc = json.loads(capsys.readouterr().out)
    assert doc["domainCount"] == 3
    assert doc["summary"]["errorCount"] == 1
    assert {"hasNameserverRecords", "hasAddressRecords"} <= set(doc["domains"][0])


def test_unregistered_only_keeps_totals(capsys, mock_probe_all):
    assert main(["example.com", "--json", "--unregistered-only"]) == 0
    doc = json.loads(capsys.readouterr().out)
    assert [d["domain"] for d in doc["domains"]] == ["unused-name.dev", "broken.io"]
    assert doc["summary"]["totalChecked"] == 3
    assert doc["summary"]["registeredCount"] == 1


def test_reads_domains_from_file(tmp_path, mock_probe_all):
    path = tmp_path / "domains.txt"
    path.write_text("a.com\n\n  b.com  \n")
    assert main(["-f", str(path)]) == 0
    args, _ = mock_probe_all.call_args
    assert args[0] == ["a.com", "b.com"]


def test_reads_domains_from_piped_stdin(mock_probe_all):
    with patch("sys.stdin", io.StringIO("a.com\nb.com\n")):
        assert main([]) == 0
    args, _ = mock_probe_all.call_args
    assert args[0] == ["a.com", "b.com"]


def test_empty_input_is_fatal(capsys, mock_probe_all):
    with patch("sys.stdin", io.StringIO("\n\n")):
        assert main([]) == 1
    assert "no domains to check" in capsys.readouterr().err
    mock_probe_all.assert_not_called()


def test_missing_input_file(capsys, tmp_path, mock_probe_all):
    assert main(["-f", str(tmp_path / "missing.txt")]) == 1
    mock_probe_all.assert_not_called()


def test_output_file_and_quiet(capsys, tmp_path, mock_probe_all):
    out = tmp_path / "report.json"
    assert main(["example.com", "-o", str(out), "-q"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Results exported to" in captured.err
    assert json.loads(out.read_text())["domainCount"] == 3


def test_output_bad_extension_rejected_before_checks(capsys, tmp_path, mock_probe_all):
    with pytest.raises(SystemExit) as exc_info:
        main(["example.com", "-o", str(tmp_path / "report.xml")])
    assert exc_info.value.code == 2
    assert "unsupported --output format" in capsys.readouterr().err
    mock_probe_all.assert_not_called()


def test_invalid_utf8_file(capsys, tmp_path, mock_probe_all):
    path = tmp_path / "domains.txt"
    path.write_bytes(b"good.com\n\xff\xfebad.com\n")
    assert main(["-f", str(path)]) == 1
    assert "Error:" in capsys.readouterr().err
    mock_probe_all.assert_not_called()


def test_invalid_utf8_stdin(capsys, mock_probe_all):
    stdin = io.TextIOWrapper(io.BytesIO(b"\xff\xfe\n"), encoding="utf-8")
    with patch("sys.stdin", stdin):
        assert main([]) == 1
    mock_probe_all.assert_not_called()


def test_keyboard_interrupt(capsys, mock_probe_all):
    mock_probe_all.side_effect = KeyboardInterrupt
    assert main(["example.com"]) == 130


def test_display_report_sorted_unregistered_first():
    test_console, buf = _capture_console()
    display_report(build_report(STATUSES), output_console=test_console)
    output = buf.getvalue()
    assert output.index("broken.io") < output.index("unused-name.dev") < output.index("example.com")


def test_display_filtered_report_hides_registered():
    test_console, buf = _capture_console()
    display_report(filter_unregistered_only(build_report(STATUSES)), output_console=test_console)
    output = buf.getvalue()
    assert "example.com" not in output
    assert "Total: 3" in output
