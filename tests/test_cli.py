"""Tests for CLI routing and the error boundary (cli/app.py).

Invocations are written to ``tmp_path``; nothing outside it is touched.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from legacy_input.cli import exit_codes
from legacy_input.cli.app import cli, main
from legacy_input.core.adapter import InputAdapter
from legacy_input.core.models import ParsedInvocation


def _write_invocation(tmp_path: Path, **payload: object) -> str:
    source = tmp_path / "invocation.json"
    source.write_text(json.dumps(payload), encoding="utf-8")
    return str(source)


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMain:
    def test_no_args_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == exit_codes.SUCCESS
        assert "usage: legacy-input" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_show_invocation(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        source = _write_invocation(
            tmp_path,
            command="status",
            arguments={"site": "@dev"},
            options={"yes": True},
        )
        assert main([source]) == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert "status" in out
        assert "@dev" in out
        assert "Interactive: true" in out

    def test_command_flag_overrides_source(self, tmp_path: Path) -> None:
        source = _write_invocation(tmp_path, command="status", arguments={"site": "@dev"})
        with patch("legacy_input.cli.view.render_input") as mock_render:
            assert main([source, "--command", "cache-rebuild"]) == exit_codes.SUCCESS
        adapter = mock_render.call_args.args[0]
        assert adapter.get_first_argument() == "cache-rebuild"
        assert adapter.get_arguments() == {"command": "cache-rebuild", "site": "@dev"}

    def test_empty_command_flag_is_rejected(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        source = _write_invocation(tmp_path, command="status")
        with pytest.raises(SystemExit) as exc_info:
            main([source, "--command", ""])
        assert exc_info.value.code == 2
        assert "--command must not be empty" in capsys.readouterr().err

    def test_adapter_built_from_loaded_invocation(self, tmp_path: Path) -> None:
        source = _write_invocation(
            tmp_path, command="status", arguments={"site": "@dev"}, interactive=True,
        )
        with patch(
            "legacy_input.core.adapter.InputAdapter.from_invocation",
            wraps=InputAdapter.from_invocation,
        ) as mock_from, patch("legacy_input.cli.view.render_input"):
            main([source, "--command", "cron", "-n"])
        invocation = mock_from.call_args.args[0]
        assert invocation == ParsedInvocation(
            arguments={"site": "@dev"},
            options={},
            command="cron",
            interactive=False,
        )

    def test_no_interaction_flag(self, tmp_path: Path) -> None:
        source = _write_invocation(tmp_path, interactive=True)
        with patch("legacy_input.cli.view.render_input") as mock_render:
            main([source, "--no-interaction"])
        assert mock_render.call_args.args[0].is_interactive() is False

    def test_source_interactive_false_is_kept(self, tmp_path: Path) -> None:
        source = _write_invocation(tmp_path, interactive=False)
        with patch("legacy_input.cli.view.render_input") as mock_render:
            main([source])
        assert mock_render.call_args.args[0].is_interactive() is False

    def test_verbose_logs_to_stderr(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        source = _write_invocation(tmp_path, command="status")
        main([source, "--verbose"])
        err = capsys.readouterr().err
        assert "Ignoring bind()" in err


# ---------------------------------------------------------------------------
# cli() error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_success_exit(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        source = _write_invocation(tmp_path)
        monkeypatch.setattr("sys.argv", ["legacy-input", source])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_known_error_exit(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.argv", ["legacy-input", str(tmp_path / "absent.json")])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Invocation file not found" in err
        assert "Hint:" in err

    def test_keyboard_interrupt_exit(self) -> None:
        with patch("legacy_input.cli.app.main", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error_exit(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("legacy_input.cli.app.main", side_effect=RuntimeError("kaboom")):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaboom" in capsys.readouterr().err
