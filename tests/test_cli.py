"""Tests for CLI commands."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from pantrymatch.cli import app

runner = CliRunner()


class TestMainCommands:
    """Tests for main CLI commands."""

    def test_help(self):
        """Test that --help works."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "recipes" in result.output.lower()

    def test_run_builtin(self):
        result = runner.invoke(app, ["run", "--label", "party"])
        assert result.exit_code == 0
        assert "--- party ---" in result.output
        assert "What can we make: ['butter_pasta', 'cheese_pasta', 'pasta']" in result.output

    def test_run_add_tomato(self):
        result = runner.invoke(app, ["run", "--add", "tomato", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert "red_pasta" in data["possible_recipes"]
        assert data["unsatisfied"] == []

    def test_run_remove_flour(self):
        result = runner.invoke(app, ["run", "--remove", "flour", "--format", "json"])
        data = json.loads(result.output)
        assert data["possible_recipes"] == ["butter_pasta"]

    def test_run_unknown_ingredient(self):
        result = runner.invoke(app, ["run", "--add", "saffron"])
        assert result.exit_code == 1
        assert "saffron" in result.output

    def test_run_bad_format(self):
        result = runner.invoke(app, ["run", "--format", "xml"])
        assert result.exit_code == 1

    def test_run_bad_mode(self):
        result = runner.invoke(app, ["run", "--mode", "sideways"])
        assert result.exit_code == 1

    def test_run_with_catalog(self, pasta_catalog_data, write_catalog):
        path = write_catalog(pasta_catalog_data)
        result = runner.invoke(app, ["run", "--catalog", str(path), "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["possible_recipes"] == [
            "butter_pasta",
            "cheese_pasta",
            "pasta",
        ]

    def test_run_missing_catalog(self, tmp_path):
        result = runner.invoke(app, ["run", "--catalog", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_run_invalid_catalog(self, pasta_catalog_data, write_catalog):
        pasta_catalog_data["recipes"][0]["ingredients"].append("basil")
        result = runner.invoke(app, ["run", "--catalog", str(write_catalog(pasta_catalog_data))])
        assert result.exit_code == 1
        assert "basil" in result.output

    def test_run_unparsable_catalog(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("recipes: [unclosed")
        result = runner.invoke(app, ["run", "--catalog", str(path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "YAML" in result.output

    def test_demo_prints_four_identical_runs(self):
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0
        for label in ("v1.1", "v1.2", "v1.1 with Monads", "v1.2 with Monads"):
            assert f"--- {label} ---" in result.output
        assert result.output.count("What can we make: ['butter_pasta', 'cheese_pasta', 'pasta']") == 4

    def test_closure(self):
        result = runner.invoke(app, ["closure"])
        assert result.exit_code == 0
        assert "pasta" in result.output
        assert "derived" in result.output

    def test_recipes(self):
        result = runner.invoke(app, ["recipes"])
        assert result.exit_code == 0
        assert "red_pasta" in result.output

    def test_missing(self):
        result = runner.invoke(app, ["missing"])
        assert result.exit_code == 0
        assert "Chang" in result.output
        assert "tomato" in result.output

    def test_missing_everyone_satisfied(self):
        result = runner.invoke(app, ["missing", "--add", "tomato"])
        assert result.exit_code == 0
        assert "Everyone is satisfied" in result.output


class TestConfigCommands:
    """Tests for config subcommands."""

    def test_config_help(self):
        result = runner.invoke(app, ["config", "--help"])
        assert result.exit_code == 0

    def test_config_init_then_show(self, isolated_home):
        result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 0
        assert (isolated_home / ".pantrymatch" / "config.yaml").exists()

        result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 1

        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "resolver" in result.output

    def test_settings_file_picks_format(self, isolated_home):
        config_dir = isolated_home / ".pantrymatch"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("output:\n  format: json\n")
        result = runner.invoke(app, ["run"])
        assert result.exit_code == 0
        assert json.loads(result.output)["label"] == "pantrymatch"
