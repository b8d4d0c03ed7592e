import main


def test_headless_run_prints_final_states(capsys):
    main.main(["--headless", "--seed", "4", "--ticks", "50", "--temperature", "60"])
    out = capsys.readouterr().out
    assert out.startswith("Layout: ")
    assert "Hill climber starts at" in out
    assert "Annealer starts at" in out
    assert "hill_climb: (" in out
    assert "annealing: (" in out
    assert "temperature=" in out


def test_headless_run_is_reproducible(capsys):
    main.main(["--headless", "--seed", "12", "--ticks", "30", "--rows", "20", "--cols", "24"])
    first = capsys.readouterr().out
    main.main(["--headless", "--seed", "12", "--ticks", "30", "--rows", "20", "--cols", "24"])
    assert capsys.readouterr().out == first
    assert "'size': '24x20'" in first
