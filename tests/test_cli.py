from main import run_cli


def test_list(capsys):
    assert run_cli(["--list"]) == 0
    out = capsys.readouterr().out
    assert "combustion" in out
    assert "Hydrogen" in out


def test_unknown_entity():
    assert run_cli(["--entity", "Unobtainium"]) == 2


def test_paused_reaction_summary(capsys):
    assert run_cli(["--entity", "combustion", "--paused", "--level", "10"]) == 0
    out = capsys.readouterr().out
    assert "Methane Combustion" in out
    assert "Temp: 200K | State: Solid" in out
    assert "phase: reactants" in out


def test_export_png(tmp_path):
    import matplotlib
    matplotlib.use("Agg")
    out = tmp_path / "na.png"
    assert run_cli(["--entity", "Na", "--time", "1.5", "--export-png", str(out)]) == 0
    assert out.exists()


def test_bad_catalog(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert run_cli(["--catalog", str(bad), "--list"]) == 1
