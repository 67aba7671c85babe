"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: dates.py
@DateTime: 2026-10-19
@Docs: Date-time parsing and clock helpers for date rules.
日期规则使用的日期时间解析与时钟辅助。
"""

import logging
from datetime import datetime
from typing import Any

from form_rules.config import FormRulesConfig, resolve_config

logger = logging.getLogger(__name__)


def _blank(value: object | None) -> bool:
    if value is None:
        return True
    return not str(value).strip()


def _to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def system_clock() -> datetime:
    """Return the current local time (naive).
    返回当前本地时间（无时区）。
    """
    return datetime.now()


class DatetimeCodec:
    """Codec for form date-time strings.
    表单日期时间字符串编解码器。

    Parsing tries each configured `strptime` format in order, then ISO 8601
    when enabled. Aware values are converted to local naive time so that every
    comparison happens between naive datetimes.
    解析时按顺序尝试配置的 `strptime` 格式，启用时再尝试 ISO 8601。
    带时区的值会转换为本地无时区时间，保证比较都在无时区时间之间进行。
    """

    __slots__ = ("_formats", "_accept_iso")

    def __init__(self, formats: tuple[str, ...] | None = None, *, accept_iso: bool = True) -> None:
        """Initialize the codec.
        初始化编解码器。

        Args:
            formats: `strptime` formats (defaults to the resolved configuration).
                `strptime` 格式（默认使用解析后的配置）。
            accept_iso: Whether ISO 8601 strings are accepted.
                是否接受 ISO 8601 字符串。
        """
        self._formats = tuple(formats) if formats is not None else resolve_config().date_formats
        self._accept_iso = accept_iso

    @classmethod
    def from_config(cls, config: FormRulesConfig | None = None) -> "DatetimeCodec":
        """Build a codec from configuration.
        根据配置构建编解码器。

        Args:
            config: Configuration (resolved from the environment when omitted).
                配置（省略时从环境变量解析）。
        Returns:
            DatetimeCodec: Codec instance.
                编解码器实例。
        """
        cfg = config or resolve_config()
        return cls(cfg.date_formats, accept_iso=cfg.accept_iso)

    @property
    def formats(self) -> tuple[str, ...]:
        return self._formats

    def parse(self, value: Any | None) -> datetime | None:
        """Parse a raw value into a naive datetime.
        将原始值解析为无时区 datetime。

        Args:
            value: Raw value (string or datetime).
                原始值（字符串或 datetime）。
        Returns:
            datetime | None: Parsed datetime, or None when the value is blank.
                解析后的 datetime；值为空时返回 None。
        Raises:
            ValueError: When the value matches no accepted format.
                当值不匹配任何可接受格式时抛出 ValueError。
        """
        if isinstance(value, datetime):
            return _to_local_naive(value)
        if _blank(value):
            return None
        text = str(value).strip()
        for fmt in self._formats:
            try:
                return datetime.strptime(text, fmt)
            except ValueError:
                continue
        if self._accept_iso:
            iso = f"{text[:-1]}+00:00" if text.endswith("Z") else text
            try:
                return _to_local_naive(datetime.fromisoformat(iso))
            except ValueError:
                pass
        raise ValueError(f"Invalid date time value: {text}")

    def try_parse(self, value: Any | None) -> datetime | None:
        """Parse a value, returning None when it is blank or unparsable.
        解析值；为空或无法解析时返回 None。
        """
        try:
            return self.parse(value)
        except ValueError:
            logger.debug("Unparsable date time value: %r", value)
            return None

    def format(self, value: datetime | None) -> str:
        """Format a datetime with the first configured format.
        使用第一个配置格式格式化 datetime。
        """
        if value is None:
            return ""
        return value.strftime(self._formats[0]).lower() if self._formats else value.isoformat()
