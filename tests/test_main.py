"""Tests for the pygame front-end's setup and layout helpers (no window opened)."""

from src.greedy_snake.config import BOARD_SIZE, CELL_SIZE, HIGH_SCORE_ENV, HUD_HEIGHT, Direction
from src.greedy_snake.main import (
    PAD_HEIGHT,
    build_config,
    build_store,
    button_at,
    dpad_rects,
    parse_args,
    window_size,
)
from src.greedy_snake.scores import InMemoryScoreStore, JsonScoreStore


class TestParseArgs:
    """Tests for command-line parsing."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(HIGH_SCORE_ENV, raising=False)
        args = parse_args([])
        assert args.seed is None
        assert args.cell_size == CELL_SIZE
        assert args.no_save is False
        assert args.log_level == "WARNING"
        assert args.high_score_file.endswith("highscore.json")

    def test_env_overrides_score_file(self, monkeypatch, tmp_path):
        path = str(tmp_path / "best.json")
        monkeypatch.setenv(HIGH_SCORE_ENV, path)
        assert parse_args([]).high_score_file == path

    def test_flag_beats_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv(HIGH_SCORE_ENV, str(tmp_path / "env.json"))
        flag = str(tmp_path / "flag.json")
        assert parse_args(["--high-score-file", flag]).high_score_file == flag

    def test_build_store(self, tmp_path):
        path = str(tmp_path / "best.json")
        cfg = build_config(parse_args(["--high-score-file", path]))
        assert cfg.high_score_file == path
        store = build_store(cfg)
        assert isinstance(store, JsonScoreStore)
        assert store.path == path
        assert isinstance(build_store(cfg, no_save=True), InMemoryScoreStore)

    def test_build_config(self):
        cfg = build_config(parse_args(["--seed", "42", "--no-save"]))
        assert cfg.seed == 42


class TestLayout:
    """Tests for window and D-pad geometry."""

    def test_window_size(self):
        width, height = window_size(10)
        assert width == 10 * BOARD_SIZE
        assert height == HUD_HEIGHT + 10 * BOARD_SIZE + PAD_HEIGHT

    def test_buttons_hit_their_direction(self):
        buttons = dpad_rects(CELL_SIZE)
        for direction, rect in buttons.items():
            assert button_at(rect.center, buttons) is direction

    def test_buttons_below_board(self):
        board_bottom = HUD_HEIGHT + CELL_SIZE * BOARD_SIZE
        assert all(rect.top >= board_bottom for rect in dpad_rects(CELL_SIZE).values())

    def test_click_on_board_is_not_a_button(self):
        assert button_at((5, HUD_HEIGHT + 5), dpad_rects(CELL_SIZE)) is None

    def test_up_is_above_down(self):
        buttons = dpad_rects(CELL_SIZE)
        assert buttons[Direction.UP].bottom <= buttons[Direction.DOWN].top
        assert buttons[Direction.LEFT].right <= buttons[Direction.RIGHT].left
