"""Integration tests for the waymark CLI."""

from pathlib import Path

from typer.testing import CliRunner

from waymark.cli import app
from waymark.core.constraints import ListKind


runner = CliRunner()


class TestCLI:
    """Integration tests for CLI commands."""

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "browse" in result.stdout
        assert "list" in result.stdout
        assert "config" in result.stdout

    def test_list_collections(self, library_file):
        result = runner.invoke(app, ["list", str(library_file)])
        assert result.exit_code == 0, result.output
        assert "Bookmarks" in result.output
        assert "Trails" in result.output
        assert "Day hikes" in result.output
        assert "Water" in result.output
        # Empty collections are not offered.
        assert "Empty" not in result.output

    def test_list_collection_with_location(self, library_file):
        result = runner.invoke(
            app, ["list", str(library_file), "--collection", "trails", "--here", "45.5,-121.8"]
        )
        assert result.exit_code == 0, result.output
        assert "Ramona Falls" in result.output
        assert "556 m" in result.output
        assert "Waterfall" in result.output
        assert "1.1 km" in result.output

    def test_list_collection_without_location_hides_distance(self, library_file):
        result = runner.invoke(app, ["list", str(library_file), "-c", "trails"])
        assert result.exit_code == 0, result.output
        assert "Ramona Falls Trail" in result.output
        assert "556" not in result.output
        assert "km" not in result.output
        # The feature label needs a location fix to be shown.
        assert "Waterfall" not in result.output

    def test_limit_option(self, library_file):
        result = runner.invoke(app, ["list", str(library_file), "-c", "trails", "--limit", "1"])
        assert result.exit_code == 0, result.output
        assert "Ramona Falls" in result.output
        assert "McNeil Point" not in result.output

    def test_limit_from_config(self, library_file, tmp_path):
        cfg = tmp_path / "cfg.yaml"
        cfg.write_text("list_limit: 1\nlocale: fr\n", encoding="utf-8")
        result = runner.invoke(app, ["list", str(library_file), "--config", str(cfg)])
        assert result.exit_code == 0, result.output
        assert "Signets" in result.output
        assert "Trails" in result.output
        assert "Water" not in result.output

    def test_unknown_collection(self, library_file):
        result = runner.invoke(app, ["list", str(library_file), "-c", "nope"])
        assert result.exit_code == 1
        assert "Unknown collection" in result.output

    def test_bad_location(self, library_file):
        result = runner.invoke(app, ["list", str(library_file), "--here", "north"])
        assert result.exit_code == 1
        assert "LAT,LON" in result.output

    def test_bad_limit(self, library_file):
        result = runner.invoke(app, ["list", str(library_file), "--limit", "0"])
        assert result.exit_code == 1
        assert "--limit" in result.output

    def test_missing_library(self, tmp_path):
        result = runner.invoke(app, ["list", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1
        assert "Cannot load library" in result.output

    def test_list_prints_profiling_summary(self, library_file, monkeypatch):
        from waymark.utils import profiling

        monkeypatch.setattr(profiling, "_PROFILING_ENABLED", True)
        profiling.clear_profiling_data()
        try:
            result = runner.invoke(app, ["list", str(library_file)])
        finally:
            profiling.clear_profiling_data()
        assert result.exit_code == 0, result.output
        assert "Profiling Summary" in result.output
        assert "render_categories" in result.output

    def test_browse_launches_app(self, library_file, monkeypatch):
        from waymark.tui.app import WaymarkApp

        launched = {}

        def _fake_run(self):
            launched["app"] = self

        monkeypatch.setattr(WaymarkApp, "run", _fake_run)
        result = runner.invoke(app, ["browse", str(library_file), "--here", "45.5,-121.8", "--limit", "3"])
        assert result.exit_code == 0, result.output

        tui = launched["app"]
        assert tui.context.location.current_location().lat == 45.5
        assert tui.context.constraints.content_limit(ListKind.LIST) == 3
        assert tui.context.store.member_count("trails") == 2

    def test_browse_reports_library_errors(self, tmp_path):
        result = runner.invoke(app, ["browse", str(tmp_path)])
        assert result.exit_code == 1
        assert "No .gpx" in result.output


class TestConfigCommands:
    def test_show(self, tmp_path):
        cfg = tmp_path / "cfg.yaml"
        cfg.write_text("units: imperial\n", encoding="utf-8")
        result = runner.invoke(app, ["config", "show", "--config", str(cfg)])
        assert result.exit_code == 0, result.output
        assert "imperial" in result.output
        assert "fallback_list_limit" in result.output

    def test_show_invalid(self, tmp_path):
        cfg = tmp_path / "cfg.yaml"
        cfg.write_text("units: furlongs\n", encoding="utf-8")
        result = runner.invoke(app, ["config", "show", "--config", str(cfg)])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_export(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        out = tmp_path / "exported.yaml"
        result = runner.invoke(app, ["config", "export", str(out)])
        assert result.exit_code == 0, result.output
        assert out.exists()

        again = runner.invoke(app, ["config", "export", str(out)])
        assert again.exit_code == 1
        assert "already" in again.output

        forced = runner.invoke(app, ["config", "export", str(out), "--force"])
        assert forced.exit_code == 0

    def test_export_default_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["config", "export"])
        assert result.exit_code == 0, result.output
        assert Path(tmp_path / "waymark_config.yaml").exists()
