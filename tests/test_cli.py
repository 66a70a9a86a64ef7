import json

from tw_shades.cli import main


def test_cli_prints_scale(capsys):
    assert main(["#3498db"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 11
    assert out[0] == "  50: rgb(235, 245, 251)"
    assert out[-1] == " 950: rgb(5, 15, 22)"


def test_cli_json(capsys):
    assert main(["#3498db", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["500"] == "rgb(52, 152, 219)"
    assert list(data.keys())[0] == "50"


def test_cli_single_and_variable(capsys):
    assert main(["#ffffff", "--single"]) == 0
    assert capsys.readouterr().out.strip() == "rgb(255 255 255 / <alpha-value>)"
    assert main(["--", "--brand-color"]) == 0
    assert capsys.readouterr().out.strip() == "rgb(var(--brand-color) / <alpha-value>)"


def test_cli_reports_errors(capsys):
    assert main(["notacolor"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error: Unsupported color format: notacolor")
