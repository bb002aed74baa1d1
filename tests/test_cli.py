"""Tests for the click CLI."""
from __future__ import annotations

import re

import pytest
from click.testing import CliRunner

from syslogfmt.cli import main
from syslogfmt.formatters.registry import default_registry
from syslogfmt.formatters.rfc5424 import RFC5424Formatter


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def _format(runner: CliRunner, *args: str):
    return runner.invoke(main, ["format", *args])


class TestFormatCommand:
    def test_rfc5424_line(self, runner: CliRunner) -> None:
        result = _format(runner, "content", "-p", "rfc5424", "-s", "err", "--hostname", "hostname",
                         "--app-name", "appName", "-t", "tag")
        assert result.exit_code == 0, result.output
        assert re.fullmatch(r"<27>1 \S+Z hostname appName \d+ tag - content\n", result.output)

    def test_rfc3164_line(self, runner: CliRunner) -> None:
        result = _format(runner, "content", "-p", "rfc3164", "-s", "err", "--hostname", "hostname", "-t", "tag")
        assert result.exit_code == 0, result.output
        assert re.fullmatch(r"<27>\w{3} [ \d]\d \d\d:\d\d:\d\d hostname tag\[\d+\]: content\n", result.output)

    def test_facility_and_precision(self, runner: CliRunner) -> None:
        result = _format(runner, "x", "-p", "rfc5424", "-f", "local0", "-s", "warning", "--precision", "micro",
                         "--hostname", "h", "--app-name", "a")
        assert result.exit_code == 0, result.output
        assert result.output.startswith("<132>1 ")
        assert re.search(r"T\d\d:\d\d:\d\d\.\d{6}Z ", result.output)

    def test_structured_data_and_well_known(self, runner: CliRunner) -> None:
        result = _format(
            runner, "ok", "-p", "rfc5424", "--hostname", "h", "--app-name", "a", "-t", "m",
            "--sd", "req@32473:id=7,path=/api",
            "--time-quality", "1,0,50",
            "--origin-ip", "10.0.0.1", "--origin-ip", "10.0.0.2", "--software", "sw",
            "--sequence-id", "3000000000", "--language", "en",
        )
        assert result.exit_code == 0, result.output
        line = result.output.rstrip("\n")
        assert ' m [req@32473 id="7" path="/api"] [timeQuality tzKnown="1" isSynced="0"]' in line
        assert '[origin ip="10.0.0.1" ip="10.0.0.2" enterpriseId="" software="sw" swVersion=""]' in line
        assert '[meta sequenceId="2147483647" sysUpTime="0" language="en"] ok' in line

    def test_structured_data_ignored_for_rfc3164(self, runner: CliRunner) -> None:
        result = _format(runner, "ok", "-p", "rfc3164", "--hostname", "h", "-t", "t", "--sd", "a:k=v")
        assert result.exit_code == 0
        assert "[a " not in result.output

    def test_table_output(self, runner: CliRunner) -> None:
        result = _format(runner, "ok", "-p", "rfc5424", "-s", "err", "-f", "daemon", "--output", "table")
        assert result.exit_code == 0, result.output
        assert "priority" in result.output
        assert "27" in result.output

    @pytest.mark.parametrize("args", [
        ["-s", "loud"],
        ["-f", "local9"],
        ["-p", "cef"],
        ["--sd", "no-colon"],
        ["--sd", "id:novalue"],
        ["--time-quality", "1"],
        ["--precision", "nano"],
    ])
    def test_bad_parameters(self, runner: CliRunner, args: list[str]) -> None:
        result = _format(runner, "x", *args)
        assert result.exit_code == 2

    def test_unknown_protocol_message(self, runner: CliRunner) -> None:
        result = _format(runner, "x", "-p", "cef")
        assert result.exit_code == 2
        assert "Unknown formatter 'cef'" in result.output

    def test_protocol_from_plugin(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        class Shout:
            name = "shout"

            def render(self, severity: int, message: str) -> str:
                return f"{int(severity)}!{message.upper()}"

        def discover() -> int:
            default_registry.register("shout", Shout)
            return 1

        monkeypatch.setattr(default_registry, "_factories", dict(default_registry._factories))
        monkeypatch.setattr(default_registry, "discover", discover)
        result = _format(runner, "hello", "-p", "shout", "-s", "err")
        assert result.exit_code == 0, result.output
        assert result.output == "3!HELLO\n"

    def test_formatter_closed_when_render_fails(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        closed: list[bool] = []
        original_close = RFC5424Formatter.close

        def boom(self, severity: int, message: str) -> str:
            raise RuntimeError("render failed")

        def close(self) -> None:
            closed.append(True)
            original_close(self)

        monkeypatch.setattr(RFC5424Formatter, "render", boom)
        monkeypatch.setattr(RFC5424Formatter, "close", close)
        result = _format(runner, "x", "-p", "rfc5424")
        assert isinstance(result.exception, RuntimeError)
        assert closed == [True]


class TestFormatsCommand:
    def test_lists_builtins(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["formats", "--no-discover"])
        assert result.exit_code == 0, result.output
        for name in ("default", "unix", "rfc3164", "rfc5424"):
            assert name in result.output


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "1.0.0" in result.output
