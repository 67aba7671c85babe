"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: validation_core.py
@DateTime: 2026-10-19
@Docs: Error-map primitives.
错误映射原语。

An error map holds an entry only for fields with a failing rule; a missing key
means the field is valid. Consumers rely on this to avoid rendering empty
error boxes.
错误映射只包含校验失败的字段；键不存在即表示字段有效。
使用方依赖这一点避免渲染空的错误提示。

It only provides:
仅提供如下内容：
- ErrorCollector: build a sparse error map, first message per field wins.
    ErrorCollector：构建稀疏错误映射，每个字段保留第一条消息。
- has_errors / visible_errors / merge_error_maps: read-side helpers.
    has_errors / visible_errors / merge_error_maps：读取侧辅助函数。
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from form_rules.typing import ErrorMap


@dataclass(slots=True)
class ErrorCollector:
    """Collect field errors into a sparse error map.
    将字段错误收集为稀疏错误映射。
    """

    errors: ErrorMap = field(default_factory=dict)

    def add(self, field: str, message: str | None) -> bool:
        """Add an error for a field.
        为字段添加错误。

        Empty messages are ignored and an existing message is never replaced.
        空消息会被忽略，已存在的消息不会被覆盖。

        Args:
            field: Field name.
                字段名。
            message: Error message (None or empty means valid).
                错误消息（None 或空字符串表示有效）。

        Returns:
            bool: True when the message was recorded.
                记录了该消息时返回 True。
        """
        if not message or field in self.errors:
            return False
        self.errors[field] = str(message)
        return True

    def update(self, error_map: Mapping[str, str | None]) -> None:
        """Add every entry of an error map.
        添加错误映射中的每一项。
        """
        for name, message in error_map.items():
            self.add(name, message)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> ErrorMap:
        """Return a fresh copy of the collected errors.
        返回已收集错误的新副本。
        """
        return dict(self.errors)


def has_errors(error_map: Mapping[str, str] | None) -> bool:
    """Return True when the error map blocks submission.
    错误映射阻止提交时返回 True。
    """
    return bool(error_map)


def visible_errors(error_map: Mapping[str, str], touched: Iterable[str]) -> ErrorMap:
    """Keep only errors for fields the user has touched.
    仅保留用户已操作过的字段的错误。

    Args:
        error_map: Full error map.
            完整错误映射。
        touched: Names of touched fields.
            已操作过的字段名。

    Returns:
        ErrorMap: Errors to display.
            需要展示的错误。
    """
    names = set(touched)
    return {k: v for k, v in error_map.items() if k in names}


def merge_error_maps(*maps: Mapping[str, str | None]) -> ErrorMap:
    """Merge error maps; the first map providing a field wins.
    合并错误映射；先出现的字段消息优先。
    """
    collector = ErrorCollector()
    for m in maps:
        collector.update(m)
    return collector.to_dict()
