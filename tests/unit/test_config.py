"""
配置(DemoConfig)单元测试
"""

import argparse

import pytest

from playing_card.core import DemoConfig, CardConfigError


@pytest.mark.unit
@pytest.mark.fast
class TestDemoConfig:
    """演示配置测试"""

    def test_defaults(self):
        config = DemoConfig()
        assert config.art is False
        assert config.log_level == "WARNING"

    def test_log_level_is_normalized(self):
        assert DemoConfig(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("level", ["VERBOSE", "", None, 10])
    def test_invalid_log_level(self, level):
        with pytest.raises(CardConfigError):
            DemoConfig(log_level=level)

    def test_invalid_art(self):
        with pytest.raises(CardConfigError):
            DemoConfig(art="yes")

    def test_from_args(self):
        args = argparse.Namespace(art=True, log_level="INFO")
        config = DemoConfig.from_args(args)
        assert config == DemoConfig(art=True, log_level="INFO")
