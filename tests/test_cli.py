import json
from pathlib import Path

from typer.testing import CliRunner

from genheap.cli import app

runner = CliRunner()


def test_non_numeric_passes_fails() -> None:
    result = runner.invoke(app, ["many"])
    assert result.exit_code == 2
    assert "Fixture ready" not in result.output


def test_missing_passes_fails() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 2


def test_negative_passes_fails() -> None:
    result = runner.invoke(app, ["--", "-3"])
    assert result.exit_code == 2


def test_dry_run_prints_shape() -> None:
    result = runner.invoke(app, ["25", "--dry-run"])
    assert result.exit_code == 0
    assert "Discarded records" in result.output
    assert "Fixture ready" not in result.output


def test_run_with_manifest(tmp_path: Path) -> None:
    manifest_dir = tmp_path / "manifest"
    result = runner.invoke(app, ["12", "--pause-s", "0", "--manifest", str(manifest_dir)])
    assert result.exit_code == 0, result.output
    assert "Fixture ready" in result.output
    payload = json.loads((manifest_dir / "manifest.json").read_text(encoding="utf-8"))
    assert payload["shape"]["batches"] == 1
    assert payload["pause_s"] == 0


def test_bad_profile_reports_error(tmp_path: Path) -> None:
    profile_path = tmp_path / "genheap.yaml"
    profile_path.write_text("pause_s: -5\n", encoding="utf-8")
    result = runner.invoke(app, ["10", "--profile", str(profile_path)])
    assert result.exit_code == 1
    assert "error:" in result.output


def test_non_finite_pause_is_a_usage_error() -> None:
    for value in ("inf", "nan"):
        result = runner.invoke(app, ["1", "--pause-s", value])
        assert result.exit_code == 2, result.output
        assert "Fixture ready" not in result.output


def test_interrupt_exits_130(monkeypatch) -> None:
    def interrupted(passes, settings):
        raise KeyboardInterrupt

    monkeypatch.setattr("genheap.cli.generate", interrupted)
    result = runner.invoke(app, ["5", "--pause-s", "0"])
    assert result.exit_code == 130
    assert "Interrupted" in result.output
