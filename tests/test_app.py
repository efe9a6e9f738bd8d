import pytest

from tictactoe_ai import config
from tictactoe_ai.app import build_parser, parse_args


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DELAY_MS", "SEED", "LOG_LEVEL"):
        monkeypatch.delenv(config.ENV_PREFIX + name, raising=False)


def test_defaults():
    args = parse_args([])
    assert args.delay == config.THINKING_DELAY_MS
    assert args.seed is None
    assert args.log_level == "INFO"
    assert args.difficulty is None


def test_environment_fills_missing_options(monkeypatch):
    monkeypatch.setenv("TICTACTOE_AI_DELAY_MS", "120")
    monkeypatch.setenv("TICTACTOE_AI_SEED", "9")
    monkeypatch.setenv("TICTACTOE_AI_LOG_LEVEL", "debug")
    args = parse_args([])
    assert args.delay == 120
    assert args.seed == 9
    assert args.log_level == "DEBUG"


def test_command_line_beats_environment(monkeypatch):
    monkeypatch.setenv("TICTACTOE_AI_DELAY_MS", "120")
    args = parse_args(["--delay", "0", "--seed", "3", "--difficulty", "hard",
                       "--log-level", "warning"])
    assert args.delay == 0
    assert args.seed == 3
    assert args.difficulty == "hard"
    assert args.log_level == "WARNING"


@pytest.mark.parametrize("argv", [
    ["--delay", "-5"],
    ["--delay", "soon"],
    ["--difficulty", "impossible"],
])
def test_bad_options_exit(argv):
    with pytest.raises(SystemExit):
        build_parser().parse_args(argv)


def test_bad_environment_value(monkeypatch):
    monkeypatch.setenv("TICTACTOE_AI_DELAY_MS", "soon")
    with pytest.raises(ValueError):
        config.thinking_delay_ms()
    monkeypatch.setenv("TICTACTOE_AI_DELAY_MS", "-1")
    with pytest.raises(ValueError):
        config.thinking_delay_ms()
