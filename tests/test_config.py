import pytest

from loa.game import GameConfig, TieBreak, load_yaml_config


def test_load_yaml_config_reads_file(tmp_path):
    path = tmp_path / "console.yaml"
    path.write_text("tie_break: draw\nmax_moves: 50\nshow_board_after_move: true\n")

    config = GameConfig.from_mapping(load_yaml_config(path))

    assert config.tie_break == TieBreak.DRAW
    assert config.max_moves == 50
    assert config.show_board_after_move is True
    assert config.prompt is True


def test_missing_or_empty_file_gives_defaults(tmp_path):
    assert load_yaml_config(tmp_path / "absent.yaml") == {}
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert load_yaml_config(empty) == {}
    assert GameConfig.from_mapping({}) == GameConfig()


def test_null_values_keep_defaults():
    config = GameConfig.from_mapping({"tie_break": None, "max_moves": None})
    assert config.tie_break == TieBreak.MOVER
    assert config.max_moves is None


@pytest.mark.parametrize(
    "data",
    [{"colour": "black"}, {"tie_break": "coin_flip"}, {"max_moves": 0}],
)
def test_invalid_config_raises(data):
    with pytest.raises(ValueError):
        GameConfig.from_mapping(data)


def test_shipped_config_loads():
    from pathlib import Path

    path = Path(__file__).resolve().parent.parent / "configs" / "console.yaml"
    config = GameConfig.from_mapping(load_yaml_config(path))
    assert config == GameConfig()
