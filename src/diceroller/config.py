"""配置管理模块"""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """骰点引擎配置，可通过 DICE_ROLLER_ 前缀的环境变量或 .env 覆盖"""

    model_config = SettingsConfigDict(
        env_prefix="DICE_ROLLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 日志配置
    log_level: str = "INFO"
    log_path: Optional[Path] = None

    # 追踪器写日志时使用的级别
    trace_level: str = "DEBUG"

    # 解析器限制
    max_dice_count: int = Field(100, ge=1)
    max_sides: int = Field(1000, ge=2)
    max_operand: int = Field(1_000_000, ge=1)
    # 乘方的指数单独限制，避免求值时产生过大的整数
    max_exponent: int = Field(10, ge=1)

    def safe_dict(self) -> dict:
        """返回配置字典，路径转为字符串"""
        data = {}
        for key, value in self.model_dump().items():
            if isinstance(value, Path):
                value = str(value)
            data[key] = value
        return data

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={v!r}" for k, v in self.safe_dict().items())
        return f"Settings({items})"

    def __str__(self) -> str:
        return self.__repr__()


settings = Settings()
