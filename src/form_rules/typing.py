"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: typing.py
@DateTime: 2026-10-19
@Docs: Shared protocols and types for form rules.
表单校验规则共享协议与类型。
"""

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any, Protocol, TypeAlias

Record: TypeAlias = Mapping[str, Any]
ErrorMap: TypeAlias = dict[str, str]


class Rule(Protocol):
    """
    Rule protocol.
    规则协议。

    Args:
        value: Value of the field under validation.
        value: 待校验字段的值。
        record: The whole record, for rules that inspect sibling fields.
        record: 整条记录，供需要读取兄弟字段的规则使用。

    Returns:
        str | None: Error message, or None when the value is valid.
        str | None: 错误消息；值有效时返回 None。
    """

    def __call__(self, value: Any, record: Record | None = None, /) -> str | None: ...


RuleSet: TypeAlias = Sequence[Rule]
Schema: TypeAlias = Mapping[str, Rule | RuleSet]


class Clock(Protocol):
    """
    Clock protocol.
    时钟协议。

    Returns:
        datetime: The current instant (naive local time).
        datetime: 当前时刻（本地无时区时间）。
    """

    def __call__(self) -> datetime: ...


class Validator(Protocol):
    """
    Validator protocol.
    校验器协议。

    Returns:
        ErrorMap: Sparse mapping of field -> message.
        ErrorMap: 稀疏的字段 -> 消息映射。
    """

    def __call__(self, record: Record | None = None) -> ErrorMap: ...
