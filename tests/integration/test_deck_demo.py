"""
牌组演示程序端到端测试
通过命令行入口运行演示并检查控制台输出
"""

import logging

import pytest

from playing_card.core import Deck, DemoConfig, InvalidCardError
from playing_card.ui.cli import deck_demo
from playing_card.ui.cli.deck_demo import build_parser, main, run


@pytest.mark.integration
class TestDeckDemo:
    """演示程序测试"""

    def test_compact_output(self, capsys):
        assert main([]) == 0
        lines = capsys.readouterr().out.splitlines()

        assert len(lines) == 52
        assert lines == [str(card) for card in Deck()]
        assert lines[:3] == ["A ♥", "2 ♥", "3 ♥"]
        assert lines[9:13] == ["10 ♥", "J ♥", "Q ♥", "K ♥"]
        assert lines[-1] == "K ♠"
        assert len(set(lines)) == 52

    def test_art_output(self, capsys):
        assert main(["--art"]) == 0
        out = capsys.readouterr().out

        blocks = out.rstrip("\n").split("\n┌")
        assert len(blocks) == 52
        assert out.count("\n") == 52 * 7
        assert out.startswith(Deck()[0].to_art() + "\n")
        assert out.endswith(Deck()[-1].to_art() + "\n")

    def test_log_level_option(self):
        args = build_parser().parse_args(["--log-level", "debug"])
        assert args.log_level == "DEBUG"
        assert DemoConfig.from_args(args).log_level == "DEBUG"

    def test_invalid_option_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "LOUD"])
        assert exc_info.value.code == 2

    def test_deck_failure_returns_error(self, monkeypatch, caplog, capsys):
        def broken_deck():
            raise InvalidCardError(0, "?")

        monkeypatch.setattr(deck_demo, "Deck", broken_deck)
        with caplog.at_level(logging.ERROR):
            assert run(DemoConfig()) == 1

        assert capsys.readouterr().out == ""
        assert "无法生成牌组" in caplog.text
