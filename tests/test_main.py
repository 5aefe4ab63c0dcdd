"""Tests for the command-line entry point."""

import pytest

import main


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "pieces.yaml"
    path.write_text(
        'default_piece: O\nfilled_char: "#"\nempty_char: "."\ngap: 2\n'
    )
    return path


def test_load_config(config_file):
    config = main.load_config(config_file)
    assert config["default_piece"] == "O"
    assert config["gap"] == 2


def test_load_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        main.load_config(tmp_path / "nope.yaml")


def test_load_config_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert main.load_config(path) == main.DEFAULT_CONFIG


def test_load_config_not_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        main.load_config(path)


def test_main_single_turn(config_file, capsys):
    main.main(["--config", str(config_file), "--piece", "T", "--turns", "1"])
    assert capsys.readouterr().out == "T:\n.#.\n.##\n.#.\n"


def test_main_negative_turns(config_file, capsys):
    main.main(["--config", str(config_file), "--piece", "j", "--turns", "-1"])
    assert capsys.readouterr().out == "J:\n.#.\n.#.\n##.\n"


def test_main_default_piece_from_config(config_file, capsys):
    main.main(["--config", str(config_file)])
    assert capsys.readouterr().out == "O:\n##\n##\n"


def test_main_states(config_file, capsys):
    main.main(["--config", str(config_file), "--piece", "O", "--states"])
    assert capsys.readouterr().out == "O:\n##  ##  ##  ##\n##  ##  ##  ##\n"


def test_main_all_pieces(config_file, capsys):
    main.main(["--config", str(config_file), "--piece", "all"])
    out = capsys.readouterr().out
    assert [line for line in out.split("\n") if line.endswith(":")] == [
        "I:", "O:", "T:", "S:", "Z:", "J:", "L:",
    ]


def test_main_unknown_piece(config_file, capsys):
    with pytest.raises(SystemExit) as exc:
        main.main(["--config", str(config_file), "--piece", "X"])
    assert exc.value.code == 1
    assert "unknown piece" in capsys.readouterr().err


def test_main_missing_config(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main.main(["--config", str(tmp_path / "missing.yaml")])
    assert exc.value.code == 1
    assert "Config file not found" in capsys.readouterr().err
