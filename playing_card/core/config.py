"""
演示程序配置
"""

import argparse
from dataclasses import dataclass

from .exceptions import CardConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DemoConfig:
    """
    牌组演示程序的配置.
    """
    art: bool = False                  # 输出字符画而不是简短格式
    log_level: str = "WARNING"         # 日志级别

    def __post_init__(self):
        """验证配置的有效性"""
        if not isinstance(self.art, bool):
            raise CardConfigError(f"art必须是布尔值: {self.art!r}")

        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise CardConfigError(f"无效的日志级别: {self.log_level!r}")

        self.log_level = self.log_level.upper()

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'DemoConfig':
        """从命令行参数创建配置"""
        return cls(art=args.art, log_level=args.log_level)
