"""Tests for cli.py - Command line entry point."""

from __future__ import annotations

import json

import pytest

from brickpi_color import cli


@pytest.fixture
def no_user_config(monkeypatch, tmp_path):
    """Point the default config file at an empty temp directory."""
    monkeypatch.setattr("brickpi_color.config.CONFIG_FILE", tmp_path / "config.json")


class TestMain:
    """Tests for cli.main()."""

    def test_json_full_color(self, no_user_config, capsys):
        assert cli.main(["--json", "--scalar", "6", "--channels", "300", "20", "500", "0"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["mode"] == "FullColor"
        assert data["value"] == 6
        assert data["text"] == "White"
        assert data["rgb"] == [44, 20, 244]
        assert data["port"] == 0

    def test_json_ambient(self, no_user_config, capsys):
        assert cli.main(["--json", "--mode", "ambient", "--port", "S2", "--scalar", "511"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["mode"] == "Ambient"
        assert data["text"] == "49"
        assert data["port"] == 1

    def test_next_cycles_mode(self, no_user_config, capsys):
        assert cli.main(["--json", "--next", "--next"]) == 0
        assert json.loads(capsys.readouterr().out)["mode"] == "GreenChannel"

    def test_previous_wraps(self, no_user_config, capsys):
        assert cli.main(["--json", "--previous"]) == 0
        assert json.loads(capsys.readouterr().out)["mode"] == "Ambient"

    def test_full_scale_override(self, no_user_config, capsys):
        cli.main(["--json", "--mode", "reflection", "--scalar", "50", "--full-scale", "100"])
        assert json.loads(capsys.readouterr().out)["text"] == "50"

    def test_config_file_used(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"port": "S4", "mode": "BlueChannel"}))
        assert cli.main(["--json", "--config", str(path)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["port"] == 3
        assert data["mode"] == "BlueChannel"

    def test_table_output(self, no_user_config, capsys):
        assert cli.main(["--scalar", "5"]) == 0
        out = capsys.readouterr().out
        assert "NXT Color Sensor on port S1" in out
        assert "Red" in out

    def test_unknown_bus(self, no_user_config, capsys):
        assert cli.main(["--bus", "SerialBus"]) == 1
        assert "Unknown bus backend" in capsys.readouterr().out

    @pytest.mark.parametrize("value", ["0", "-5", "wide"])
    def test_bad_full_scale_exits(self, no_user_config, value):
        with pytest.raises(SystemExit) as exc:
            cli.main(["--json", "--mode", "ambient", "--scalar", "5", "--full-scale", value])
        assert exc.value.code == 2

    def test_bad_mode_exits(self, no_user_config):
        with pytest.raises(SystemExit) as exc:
            cli.main(["--mode", "infrared"])
        assert exc.value.code == 2

    def test_buses(self, capsys):
        assert cli.main(["--buses"]) == 0
        assert "SimulatedBus" in capsys.readouterr().out
