"""Tests for the layoutsync command-line interface."""

from __future__ import annotations

import json
from io import StringIO
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console

import layoutsync.cli as cli
from layoutsync.cli import build_parser, main
from layoutsync.cli.commands.classify import build_classification_table


def _write(path: Path, tree: dict[str, Any]) -> Path:
    path.write_text(json.dumps(tree), encoding="utf-8")
    return path


def _read(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


class TestParser:
    def test_sync_requires_mode(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["sync"])

    def test_sync_defaults(self) -> None:
        args = build_parser().parse_args(["sync", "--dry-run"])

        assert args.command == "sync"
        assert args.config == "./layoutsync.json"
        assert args.source_platform is None
        assert args.dry_run is True
        assert args.verbose is False

    def test_sync_rejects_unknown_platform(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["sync", "--apply", "--from", "tablet"])

    def test_toggle_requires_state(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["toggle", "page.json", "hero"])

    def test_version(self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("layoutsync.cli.parser._package_version", lambda: "9.9.9")

        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "layoutsync 9.9.9" in capsys.readouterr().out


class TestSyncCommand:
    def test_apply_writes_target(self, sync_config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["sync", "--config", str(sync_config_file), "--apply"])

        assert exit_code == 0
        mobile = _read(sync_config_file.parent / "mobile.json")
        assert mobile["heading"]["props"]["text"] == "Welcome"
        assert mobile["heading"]["props"]["fontSize"] == "20px"
        assert mobile["cta"]["props"]["backgroundColor"] == "#e91e63"
        assert mobile["cta"]["props"]["width"] == "120px"
        out = capsys.readouterr().out
        assert "sync complete (apply)" in out
        assert "Mode:       reconcile" in out
        assert "Updated:    3" in out

    def test_dry_run_writes_nothing(self, sync_config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        mobile_path = sync_config_file.parent / "mobile.json"
        before = mobile_path.read_text(encoding="utf-8")

        exit_code = main(["sync", "--config", str(sync_config_file), "--dry-run"])

        assert exit_code == 0
        assert mobile_path.read_text(encoding="utf-8") == before
        assert "[dry-run] No changes were made" in capsys.readouterr().out

    def test_from_mobile_reverses_direction(self, sync_config_file: Path) -> None:
        exit_code = main(["sync", "--config", str(sync_config_file), "--apply", "--from", "mobile"])

        assert exit_code == 0
        desktop = _read(sync_config_file.parent / "desktop.json")
        assert desktop["heading"]["props"]["text"] == "Hello"
        assert desktop["heading"]["props"]["fontSize"] == "32px"

    def test_bootstrap_creates_missing_target(self, sync_config_file: Path, desktop_tree: dict[str, Any]) -> None:
        mobile_path = sync_config_file.parent / "mobile.json"
        mobile_path.unlink()

        exit_code = main(["sync", "--config", str(sync_config_file), "--apply"])

        assert exit_code == 0
        assert _read(mobile_path) == desktop_tree

    def test_missing_snapshot_without_create_missing(
        self, sync_config_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        sync_config_file.write_text(
            json.dumps({"desktop_path": "desktop.json", "mobile_path": "gone.json", "create_missing": False}),
            encoding="utf-8",
        )

        exit_code = main(["sync", "--config", str(sync_config_file), "--apply"])

        assert exit_code == 3
        assert "missing or empty snapshot file" in capsys.readouterr().err

    def test_invalid_target_json(self, sync_config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        mobile_path = sync_config_file.parent / "mobile.json"
        mobile_path.write_text("{not json", encoding="utf-8")

        exit_code = main(["sync", "--config", str(sync_config_file), "--apply"])

        assert exit_code == 3
        assert "could not reconcile desktop into mobile" in capsys.readouterr().err
        assert mobile_path.read_text(encoding="utf-8") == "{not json"

    def test_missing_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["sync", "--config", str(tmp_path / "layoutsync.json"), "--dry-run"])

        assert exit_code == 3
        assert "failed reading config file" in capsys.readouterr().err

    def test_run_sync_uses_patched_orchestrator(
        self, sync_config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[str] = []
        real_sync = cli.bidirectional_sync

        def fake_sync(desktop, mobile, source_platform):
            calls.append(source_platform)
            return real_sync(desktop, mobile, source_platform)

        monkeypatch.setattr(cli, "bidirectional_sync", fake_sync)

        assert main(["sync", "--config", str(sync_config_file), "--dry-run"]) == 0
        assert calls == ["desktop"]


class TestCheckCommand:
    def test_in_sync(self, tmp_path: Path, desktop_tree: dict[str, Any], capsys: pytest.CaptureFixture[str]) -> None:
        desktop = _write(tmp_path / "desktop.json", desktop_tree)
        mobile = _write(tmp_path / "mobile.json", desktop_tree)

        assert main(["check", str(desktop), str(mobile)]) == 0
        assert "in sync" in capsys.readouterr().out

    def test_layout_only_differences_are_in_sync(
        self, tmp_path: Path, desktop_tree: dict[str, Any]
    ) -> None:
        mobile_tree = json.loads(json.dumps(desktop_tree))
        mobile_tree["heading"]["props"]["fontSize"] = "20px"
        mobile_tree["cta"]["props"]["left"] = 0
        desktop = _write(tmp_path / "desktop.json", desktop_tree)
        mobile = _write(tmp_path / "mobile.json", mobile_tree)

        assert main(["check", str(desktop), str(mobile)]) == 0

    def test_sync_needed(
        self,
        tmp_path: Path,
        desktop_tree: dict[str, Any],
        mobile_tree: dict[str, Any],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        desktop = _write(tmp_path / "desktop.json", desktop_tree)
        mobile = _write(tmp_path / "mobile.json", mobile_tree)

        assert main(["check", str(desktop), str(mobile)]) == 1
        assert "sync needed" in capsys.readouterr().out

    def test_missing_side_needs_sync(self, tmp_path: Path, desktop_tree: dict[str, Any]) -> None:
        desktop = _write(tmp_path / "desktop.json", desktop_tree)

        assert main(["check", str(desktop), str(tmp_path / "mobile.json")]) == 1


class TestClassifyCommand:
    def test_table_rows(self) -> None:
        console = Console(file=StringIO(), width=120)
        console.print(build_classification_table(["text", "width", "wrapperPaddingTop", "brandNewThing"]))
        out = console.file.getvalue()  # type: ignore[attr-defined]

        assert "Property classification" in out
        assert "allow" in out
        assert "deny" in out
        assert "keyword" in out
        assert "default" in out
        assert "platform-specific" in out

    def test_main_prints_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["classify", "color", "fontSize"]) == 0

        out = capsys.readouterr().out
        assert "color" in out
        assert "fontSize" in out


class TestConvertCommand:
    def test_writes_output_file(
        self, tmp_path: Path, desktop_tree: dict[str, Any], capsys: pytest.CaptureFixture[str]
    ) -> None:
        desktop = _write(tmp_path / "desktop.json", desktop_tree)
        output = tmp_path / "out" / "mobile.json"

        assert main(["convert", str(desktop), "-o", str(output)]) == 0

        mobile = _read(output)
        assert mobile["ROOT"]["props"]["width"] == "380px"
        assert mobile["heading"]["props"]["fontSize"] == "27px"
        assert mobile["heading"]["props"]["text"] == "Welcome"
        assert f"Wrote mobile layout to {output}" in capsys.readouterr().out

    def test_prints_to_stdout(
        self, tmp_path: Path, desktop_tree: dict[str, Any], capsys: pytest.CaptureFixture[str]
    ) -> None:
        desktop = _write(tmp_path / "desktop.json", desktop_tree)

        assert main(["convert", str(desktop)]) == 0

        assert json.loads(capsys.readouterr().out)["cta"]["props"]["width"] == "79px"

    def test_invalid_desktop(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        desktop = tmp_path / "desktop.json"
        desktop.write_text("[1, 2]", encoding="utf-8")

        assert main(["convert", str(desktop)]) == 3
        assert "invalid desktop tree" in capsys.readouterr().err


class TestToggleCommand:
    def test_disable_then_enable(
        self, tmp_path: Path, desktop_tree: dict[str, Any], capsys: pytest.CaptureFixture[str]
    ) -> None:
        snapshot = _write(tmp_path / "desktop.json", desktop_tree)

        assert main(["toggle", str(snapshot), "cta", "--disable"]) == 0
        assert _read(snapshot)["cta"]["props"]["syncCrossPlatform"] is False
        assert "Cross-platform sync disabled for node cta" in capsys.readouterr().out

        assert main(["toggle", str(snapshot), "cta", "--enable"]) == 0
        assert _read(snapshot)["cta"]["props"]["syncCrossPlatform"] is True

    def test_unknown_node(
        self, tmp_path: Path, desktop_tree: dict[str, Any], capsys: pytest.CaptureFixture[str]
    ) -> None:
        snapshot = _write(tmp_path / "desktop.json", desktop_tree)

        assert main(["toggle", str(snapshot), "nope", "--disable"]) == 3
        assert "node not found: nope" in capsys.readouterr().err


def test_verbose_configures_debug_logging(sync_config_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, Any] = {}
    monkeypatch.setattr(cli.logging, "basicConfig", lambda **kwargs: seen.update(kwargs))

    assert main(["sync", "--config", str(sync_config_file), "--dry-run", "--verbose"]) == 0
    assert seen["level"] == cli.logging.DEBUG
