"""Tests for the command line entry points and configuration."""

import io
import json

import pytest

from deck_poker.config import AppConfig
from deck_poker.scripts.evaluate import iter_lines, main, run


class TestRun:
    """Tests for evaluating a batch of lines."""

    def test_text_output(self):
        out = io.StringIO()
        failures = run(["TH JH QC QD QS QH KH AH 2S 6S"], out)

        assert failures == 0
        assert out.getvalue().strip() == (
            "Hand: TH JH QC QD QS Deck: QH KH AH 2S 6S Best hand: straight-flush"
        )

    def test_error_output(self):
        out = io.StringIO()
        failures = run(["TH JH"], out)

        assert failures == 1
        assert out.getvalue().strip() == "Error: Ten cards expected"

    def test_continues_after_error(self):
        out = io.StringIO()
        failures = run(["bad", "2H 2S 3H 3S 3C 2D 3D 6C 9C TH"], out)

        lines = out.getvalue().strip().splitlines()
        assert failures == 1
        assert lines[1].endswith("Best hand: four-of-a-kind")

    def test_verbose_trace(self):
        out = io.StringIO()
        run(["3D 5S 2H QD TD 6S KH 9H AD QH"], out, verbose=True)

        lines = out.getvalue().strip().splitlines()
        assert lines[0].endswith("Best hand: highest-card")
        assert [line.split(":")[0].strip() for line in lines[1:]] == [
            "depth 0",
            "depth 5",
            "depth 4",
            "depth 3",
            "depth 2",
            "depth 1",
        ]

    def test_json_output(self):
        out = io.StringIO()
        run(["2H AD 5H AC 7H AH 6H 9H 4H 3C", "nope"], out, as_json=True)

        first, second = [json.loads(line) for line in out.getvalue().splitlines()]
        assert first["category"] == "flush"
        assert first["rank"] == 5
        assert first["hand"] == ["2H", "AD", "5H", "AC", "7H"]
        assert second == {"input": "nope", "error": "Ten cards expected"}


class TestIterLines:
    def test_skips_blank_and_comments(self):
        stream = io.StringIO("# header\n\n2H 3C 4D 5S 6H 7C 8D 9S TH JH\n   \n")
        assert list(iter_lines(stream)) == ["2H 3C 4D 5S 6H 7C 8D 9S TH JH"]


class TestMain:
    """Tests for the argparse entry point."""

    def test_cards_as_arguments(self, capsys):
        code = main("AC 2D 6C 3S KD 5S 4D KS AS 4C".split())

        assert code == 0
        assert "Best hand: straight" in capsys.readouterr().out

    def test_bad_cards_exit_code(self, capsys):
        code = main(["2H", "3C"])

        assert code == 1
        assert "Error: Ten cards expected" in capsys.readouterr().out

    def test_file_input(self, tmp_path, capsys):
        path = tmp_path / "hands.txt"
        path.write_text(
            "# scenarios\n"
            "AH 2C 9S AD 3C QH KS JS JD KD\n"
            "6C 9C 8C 2D 7C 2H TC 4C 9S AH\n",
            encoding="utf-8",
        )

        code = main(["--file", str(path)])

        out = capsys.readouterr().out.splitlines()
        assert code == 0
        assert out[0].endswith("Best hand: two-pairs")
        assert out[1].endswith("Best hand: one-pair")

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit) as info:
            main(["--file", str(tmp_path / "missing.txt")])
        assert info.value.code == 2

    def test_no_input_is_usage_error(self):
        with pytest.raises(SystemExit) as info:
            main([])
        assert info.value.code == 2

    def test_cards_and_file_conflict(self, tmp_path):
        with pytest.raises(SystemExit) as info:
            main(["--file", str(tmp_path / "x.txt"), "2H"])
        assert info.value.code == 2

    def test_bad_log_level_is_usage_error(self, monkeypatch, capsys):
        monkeypatch.setenv("DECK_POKER_LOG_LEVEL", "verbose")
        with pytest.raises(SystemExit) as info:
            main(["TH", "JH", "QC", "QD", "QS", "QH", "KH", "AH", "2S", "6S"])
        assert info.value.code == 2
        assert "Unknown log level: VERBOSE" in capsys.readouterr().err


class TestAppConfig:
    """Tests for environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        for name in ("HOST", "PORT", "LOG_LEVEL", "PROMPT"):
            monkeypatch.delenv(f"DECK_POKER_{name}", raising=False)

        config = AppConfig.from_env()
        assert config == AppConfig()
        assert config.port == 8000
        assert config.prompt == "Cards"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("DECK_POKER_HOST", "127.0.0.1")
        monkeypatch.setenv("DECK_POKER_PORT", "9001")
        monkeypatch.setenv("DECK_POKER_LOG_LEVEL", "debug")
        monkeypatch.setenv("DECK_POKER_PROMPT", "Hand")

        config = AppConfig.from_env()
        assert config.host == "127.0.0.1"
        assert config.port == 9001
        assert config.log_level == "DEBUG"
        assert config.prompt == "Hand"

    def test_bad_port(self, monkeypatch):
        monkeypatch.setenv("DECK_POKER_PORT", "eighty")
        with pytest.raises(ValueError):
            AppConfig.from_env()

    def test_bad_log_level(self, monkeypatch):
        monkeypatch.setenv("DECK_POKER_LOG_LEVEL", "verbose")
        with pytest.raises(ValueError, match="Unknown log level: VERBOSE"):
            AppConfig.from_env()

    @pytest.mark.parametrize("level", ["debug", "Info", "WARNING", "error", "critical"])
    def test_log_level_names(self, monkeypatch, level):
        monkeypatch.setenv("DECK_POKER_LOG_LEVEL", level)
        assert AppConfig.from_env().log_level == level.upper()
