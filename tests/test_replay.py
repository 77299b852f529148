"""
Tests for replaying a configured list of moves.

Covers:
- Loading YAML configuration
- Running a replay to completion and stopping on an invalid move
- Result records and saving them as JSON
"""

import json

import pytest
import yaml

from src.engine import Board
from src.main import load_config
from src.replay import Replay, ReplayConfig, ReplayResult


@pytest.fixture
def config(word_file) -> ReplayConfig:
    return ReplayConfig(
        dictionary=str(word_file),
        moves=["7 6 H OAT", "0 0 H TOP", "5 8 V NU."],
    )


class TestLoadConfig:
    """YAML configuration files."""

    def test_load(self, tmp_path, word_file):
        path = tmp_path / "replay.yaml"
        path.write_text(yaml.safe_dump({
            "dictionary": str(word_file),
            "stop_on_invalid": True,
            "moves": ["7 6 H CAT"],
        }))
        config = load_config(str(path))
        assert config.dictionary == str(word_file)
        assert config.stop_on_invalid is True
        assert config.moves == ["7 6 H CAT"]
        assert config.board == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))


class TestReplay:
    """Replaying moves one after another."""

    def test_create_loads_dictionary(self, config):
        replay = Replay.create(config=config)
        assert replay.index.contains("oat")
        assert replay.board.is_empty()

    def test_create_from_kwargs(self, index):
        replay = Replay.create(index=index, dictionary="unused.txt", moves=["7 6 H CAT"])
        assert replay.config.moves == ["7 6 H CAT"]

    def test_run_to_completion(self, config):
        replay = Replay.create(config=config)
        result = replay.run()

        assert isinstance(result, ReplayResult)
        assert result.total_turns == 3
        assert result.moves_played == 2
        assert result.moves_rejected == 1
        assert result.total_score == 10
        assert result.end_reason == "All moves replayed"
        assert replay.is_complete

        rejected = result.turn_history[1]
        assert not rejected.valid
        assert rejected.error.code == "DISCONNECTED"
        assert result.turn_history[2].word_values == [("NUT", 4)]
        assert result.final_board == replay.board.render()

    def test_stop_on_invalid(self, config):
        config.stop_on_invalid = True
        replay = Replay.create(config=config)
        result = replay.run()
        assert result.total_turns == 2
        assert result.end_reason == "Stopped at invalid move 2"

    def test_bad_notation_is_recorded(self, index):
        replay = Replay.create(index=index, dictionary="unused.txt", moves=["seven six H CAT"])
        record = replay.step(replay.config.moves[0])
        assert not record.valid
        assert record.error.code == "INVALID_NOTATION"
        assert replay.board.is_empty()

    def test_initial_board(self, index):
        rows = ["..............."] * 7 + ["......OAT......"]
        replay = Replay.create(index=index, dictionary="unused.txt", board=rows, moves=["5 8 V NU."])
        result = replay.run()
        assert result.total_score == 4
        assert replay.board.tile_count() == 5

    def test_on_turn_callback(self, config):
        seen = []
        Replay.create(config=config).run(on_turn=lambda record: seen.append(record.turn_number))
        assert seen == [1, 2, 3]

    def test_verbose_output(self, config, capsys):
        Replay.create(config=config).run(verbose=True)
        out = capsys.readouterr().out
        assert "NUT: 4" in out
        assert "That move is disconnected" in out

    def test_empty_replay(self, index):
        result = Replay.create(index=index, dictionary="unused.txt").run()
        assert result.total_turns == 0
        assert result.final_board == Board().render()


class TestSaveResult:

    def test_save_and_reload(self, config, tmp_path):
        replay = Replay.create(config=config)
        replay.run()
        path = tmp_path / "out" / "result.json"
        replay.save_result(path)

        data = json.loads(path.read_text())
        assert data["total_score"] == 10
        assert data["turn_history"][0]["word_values"] == [["OAT", 6]]
        assert data["turn_history"][1]["error"]["positions"] == [[0, 0], [0, 1], [0, 2]]
        assert ReplayResult(**data).moves_played == 2
