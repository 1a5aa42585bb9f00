import pytest

from brickset import cli


def run(capsys, *argv):
    code = cli.main(list(argv))
    out, err = capsys.readouterr()
    return code, out.splitlines(), err


def test_tags(capsys, dataset_file):
    code, out, _ = run(capsys, "--data-file", str(dataset_file), "tags", "Microscale")
    assert code == 0
    assert out == ["2"]


def test_pieces_case_insensitive(capsys, dataset_file):
    code, out, _ = run(capsys, "--data-file", str(dataset_file), "pieces", "UNDER", "500")
    assert code == 0
    assert out == ["2"]


def test_pieces_invalid_selector_is_usage_error(capsys, dataset_file):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--data-file", str(dataset_file), "pieces", "sideways", "500"])
    assert exc.value.code == 2
    assert "invalid position" in capsys.readouterr().err


def test_theme_lists_records(capsys, dataset_file):
    code, out, _ = run(capsys, "--data-file", str(dataset_file), "theme", "Games")
    assert code == 0
    assert out == ["2-1 Game Night (Games, ?, 500 pcs)", "4-1 Dice Duel (Games, ?, 80 pcs)"]


def test_max_tags_largest_and_packaging(capsys, dataset_file):
    assert run(capsys, "--data-file", str(dataset_file), "max-tags")[1] == ["3"]
    assert run(capsys, "--data-file", str(dataset_file), "largest")[1] == ["Game Night"]
    assert run(capsys, "--data-file", str(dataset_file), "packaging")[1] == ["POLYBAG: 1", "BOX: 2"]


def test_no_data_output(capsys, tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("[]", encoding="utf-8")
    assert run(capsys, "--data-file", str(path), "largest")[1] == ["no data"]
    assert run(capsys, "--data-file", str(path), "max-tags")[1] == ["no data"]


def test_demo_is_default(capsys, dataset_file):
    code, out, _ = run(capsys, "--data-file", str(dataset_file))
    assert code == 0
    assert sum(1 for line in out if line.startswith("<")) == 5
    assert "Sets with fewer than 500 pieces: 2" in out
    assert "Largest set by volume: Game Night" in out
    assert "Max number of tags on a set: 3" in out
    assert "BOX: 2" in out


def test_load_error_exit_code(capsys, tmp_path):
    code, out, err = run(capsys, "--data-file", str(tmp_path / "missing.json"), "tags", "x")
    assert code == 1
    assert out == []
    assert "dataset not found" in err


def test_main_module_runs_bundled_demo(capsys):
    import main  # root launcher
    assert main.main is cli.main
    code, out, _ = run(capsys, "demo")
    assert code == 0
    assert "Largest set by volume: Assembly Square" in out


def test_unknown_log_level_is_usage_error(capsys, dataset_file):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--log-level", "loud", "--data-file", str(dataset_file), "tags", "x"])
    assert exc.value.code == 2
    assert "--log-level" in capsys.readouterr().err


def test_log_level_is_case_insensitive(capsys, dataset_file):
    code, out, _ = run(capsys, "--log-level", "warning", "--data-file", str(dataset_file), "tags", "Dice")
    assert code == 0
    assert out == ["1"]


def test_bad_log_level_in_env_is_usage_error(capsys, monkeypatch, dataset_file):
    monkeypatch.setenv("BRICKSET_LOG_LEVEL", "loud")
    code, out, err = run(capsys, "--data-file", str(dataset_file), "tags", "x")
    assert code == 2
    assert out == []
    assert "BRICKSET_" in err
