"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-10-19
@Docs: Form-rules configuration helpers.
表单校验规则配置助手。

Configuration helpers for date-aware rules.
日期相关规则的配置助手。

Date-time values arrive from forms as formatted strings. This module defines
which formats the date rules accept when parsing them.
表单中的日期时间值以格式化字符串传入；本模块定义日期规则解析时接受的格式。

Environment variables / 环境变量:
        - FORM_RULES_DATE_FORMATS:
            Comma-separated `strptime` formats, tried in order.
            逗号分隔的 `strptime` 格式列表，按顺序尝试。

Examples:
        Use defaults / 使用默认值:

        >>> from form_rules.config import resolve_config
        >>> cfg = resolve_config()
        >>> cfg.date_formats[0]
        '%m/%d/%Y %I:%M %p'

        Custom formats / 自定义格式:

        >>> cfg = resolve_config(date_formats=["%Y-%m-%d %H:%M"])
        >>> cfg.date_formats
        ('%Y-%m-%d %H:%M',)
"""

import os
from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_DATE_FORMATS = (
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
)


@dataclass(frozen=True, slots=True)
class FormRulesConfig:
    """Form rules configuration.

    表单校验规则配置.

    Attributes:
        date_formats: `strptime` formats accepted by date rules, in priority order.
            日期规则接受的 `strptime` 格式（按优先级排列）。
        accept_iso: Whether ISO 8601 strings are accepted after the formats.
            格式均不匹配时是否接受 ISO 8601 字符串。
    """

    date_formats: tuple[str, ...] = DEFAULT_DATE_FORMATS
    accept_iso: bool = True


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def _split_csv(value: str | None) -> list[str]:
    """
    Split a comma-separated string into items.
    将逗号分隔字符串拆分为列表。

    Args:
        value: CSV string.
            逗号分隔字符串。

    Returns:
        list[str]: Split items.
        list[str]: 拆分后的条目列表。
    """
    if value is None:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def _normalize_formats(values: Iterable[str]) -> tuple[str, ...]:
    """
    Normalize date formats, keeping the first occurrence order.
    规范化日期格式，保留首次出现的顺序。

    Args:
        values: Format values.
            格式列表。

    Returns:
        tuple[str, ...]: Normalized formats.
        tuple[str, ...]: 规范化后的格式。
    """
    normalized: list[str] = []
    for v in values:
        item = str(v).strip()
        if not item or "%" not in item or item in normalized:
            continue
        normalized.append(item)
    return tuple(normalized)


def _parse_bool(value: str | None) -> bool | None:
    if value is None:
        return None
    raw = value.strip().lower()
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off"}:
        return False
    return None


def resolve_config(
    *,
    date_formats: Iterable[str] | None = None,
    accept_iso: bool | None = None,
    env_prefix: str = "FORM_RULES",
) -> FormRulesConfig:
    """Resolve configuration from parameters and environment variables.

    从参数和环境变量解析配置。

     Resolution order / 解析优先级:
        1) function parameters / 函数参数
        2) env: `{env_prefix}_DATE_FORMATS`, `{env_prefix}_ACCEPT_ISO`
           环境变量：`{env_prefix}_DATE_FORMATS`、`{env_prefix}_ACCEPT_ISO`
        3) defaults / 默认值

    Args:
        date_formats: Accepted `strptime` formats.
            接受的 `strptime` 格式。
        accept_iso: Whether ISO 8601 strings are accepted.
            是否接受 ISO 8601 字符串。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 FORM_RULES）。

    Returns:
        A FormRulesConfig instance.
            返回 FormRulesConfig 配置实例。

    Examples:
        >>> cfg = resolve_config(env_prefix="FORM_RULES")
        >>> isinstance(cfg.date_formats, tuple)
        True
    """
    env_formats = _env_get(f"{env_prefix}_DATE_FORMATS")
    resolved_formats = _normalize_formats(
        date_formats if date_formats is not None else (_split_csv(env_formats) or DEFAULT_DATE_FORMATS)
    )
    if not resolved_formats:
        resolved_formats = DEFAULT_DATE_FORMATS

    resolved_iso = accept_iso
    if resolved_iso is None:
        env_iso = _parse_bool(_env_get(f"{env_prefix}_ACCEPT_ISO"))
        resolved_iso = True if env_iso is None else env_iso

    return FormRulesConfig(date_formats=resolved_formats, accept_iso=resolved_iso)
