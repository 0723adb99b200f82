from __future__ import annotations

import json
from pathlib import Path

import pytest

from virtual_sensor_monitor import __version__, cli


def test_cli_run_writes_log(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "run.csv"

    cli.main(["run", "--samples", "3", "--interval", "0", "--output", str(output), "--seed", "7"])

    lines = output.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 4
    assert lines[0] == "Time(s),Timestamp,Temperature(C),Pressure(bar)"
    out = capsys.readouterr().out
    assert out.count("Temperature: ") == 3
    assert "Data logging complete" in out


def test_cli_defaults_to_run_without_command(tmp_path: Path) -> None:
    output = tmp_path / "default.csv"

    cli.main(["--log-level", "WARNING", "--samples", "2", "--interval", "0", "--output", str(output), "--sensor", "pressure"])

    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Time(s),Timestamp,Pressure(bar)"
    assert len(lines) == 3
    assert all(len(line.split(",")) == 3 for line in lines)


def test_cli_flags_override_config_file(tmp_path: Path) -> None:
    config_path = tmp_path / "monitor.yml"
    config_path.write_text(
        "\n".join(["total_samples: 10", "interval_s: 0", f"output: {tmp_path / 'from_config.csv'}"]),
        encoding="utf-8",
    )
    output = tmp_path / "override.csv"

    cli.main(["run", "--config", str(config_path), "--samples", "1", "--output", str(output)])

    assert len(output.read_text(encoding="utf-8").splitlines()) == 2
    assert not (tmp_path / "from_config.csv").exists()


def test_cli_rejects_unknown_sensor(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="Invalid configuration"):
        cli.main(["run", "--sensor", "sonar", "--output", str(tmp_path / "x.csv")])


def test_cli_reports_unwritable_output(tmp_path: Path) -> None:
    output = tmp_path / "missing" / "log.csv"
    with pytest.raises(SystemExit, match="Cannot write sensor log"):
        cli.main(["run", "--samples", "1", "--interval", "0", "--output", str(output)])


def test_cli_summarize_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "run.csv"
    cli.main(["run", "--samples", "4", "--interval", "0", "--output", str(output)])
    capsys.readouterr()

    cli.main(["summarize", str(output), "--json"])

    summary = json.loads(capsys.readouterr().out)
    assert summary["rows"] == 4
    assert 20.0 <= summary["stats"]["Temperature(C)"]["min"] <= 30.0


def test_cli_summarize_missing_log(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        cli.main(["summarize", str(tmp_path / "missing.csv")])


def test_cli_plot(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    log_path = tmp_path / "run.csv"
    cli.main(["run", "--samples", "3", "--interval", "0", "--output", str(log_path)])
    png = tmp_path / "chart.png"

    cli.main(["plot", str(log_path), "--output", str(png)])

    assert png.exists()
    assert f"Wrote plot to {png}" in capsys.readouterr().out


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["version"])
    assert capsys.readouterr().out.strip() == __version__


@pytest.mark.parametrize("body", ["sensors:\n", "sensors: 5\n"])
def test_cli_rejects_non_list_sensors(tmp_path: Path, body: str) -> None:
    config_path = tmp_path / "monitor.yml"
    config_path.write_text(body, encoding="utf-8")
    with pytest.raises(SystemExit, match="Invalid configuration: Field 'sensors'"):
        cli.main(["run", "--config", str(config_path), "--output", str(tmp_path / "x.csv")])


def test_cli_rejects_malformed_yaml(tmp_path: Path) -> None:
    config_path = tmp_path / "broken.yml"
    config_path.write_text("total_samples: [1,\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="Invalid configuration: Cannot parse monitor config"):
        cli.main(["run", "--config", str(config_path)])


def test_cli_command_names_as_option_values_still_run(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    cli.main(["--samples", "1", "--interval", "0", "--output", "version"])

    assert (tmp_path / "version").read_text(encoding="utf-8").startswith("Time(s),Timestamp,")
    with pytest.raises(SystemExit, match="Unknown sensor kind 'plot'"):
        cli.main(["--sensor", "plot", "--output", "plot.csv"])
