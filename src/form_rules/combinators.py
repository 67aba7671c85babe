"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: combinators.py
@DateTime: 2026-10-19
@Docs: Rule combinator and schema-entry normalization.
规则组合器与 schema 条目规范化。
"""

import inspect
from collections.abc import Callable, Sequence
from typing import Any

from form_rules.exceptions import SchemaError
from form_rules.predicates import BUILTIN_RULES
from form_rules.typing import Record, Rule


def join(rules: Sequence[Rule]) -> Rule:
    """Compose an ordered rule list into a single rule.
    将有序规则列表组合为单条规则。

    Every rule is evaluated in list order; only the first error is reported.
    所有规则按列表顺序全部求值；只报告第一个错误。

    Args:
        rules: Ordered rules for one field.
            某个字段的有序规则。
    Returns:
        Rule: Combined rule returning the first error message, or None.
            组合后的规则，返回第一个错误消息或 None。

    Examples:
        >>> from form_rules.predicates import value_required, is_email
        >>> join([value_required, is_email])("")
        'Value Required'
    """
    chain = tuple(rules)

    def combined(value: Any, record: Record | None = None) -> str | None:
        errors = [error for error in [rule(value, record) for rule in chain] if error]
        return errors[0] if errors else None

    return combined


def _accepts_record(fn: Callable[..., Any]) -> bool:
    """Check if the callable can take the record as a second positional argument.
    检查可调用对象是否能以第二个位置参数接收记录。

    Args:
        fn: Callable to check.
            要检查的可调用对象。
    Returns:
        bool: True when `fn(value, record)` is a valid call.
            `fn(value, record)` 调用合法时返回 True。
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return True
    positional = 0
    for p in sig.parameters.values():
        if p.kind == inspect.Parameter.VAR_POSITIONAL:
            return True
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            positional += 1
    return positional >= 2


def as_rule(entry: Any, *, field: str | None = None) -> Rule:
    """Turn one schema item into a `(value, record)` rule.
    将单个 schema 项转换为 `(value, record)` 规则。

    Args:
        entry: Rule callable, single-argument callable, or builtin rule name.
            规则可调用对象、单参数可调用对象或内置规则名。
        field: Field name used in error details.
            用于错误详情的字段名。
    Returns:
        Rule: Normalized rule.
            规范化后的规则。
    Raises:
        SchemaError: When the entry is neither callable nor a known rule name.
            条目既不可调用也不是已知规则名时抛出 SchemaError。
    """
    if isinstance(entry, str):
        rule = BUILTIN_RULES.get(entry)
        if rule is None:
            raise SchemaError(
                message=f"Unknown rule name: {entry} / 未知规则名: {entry}",
                details={"field": field, "rule": entry},
            )
        return rule
    if not callable(entry):
        raise SchemaError(
            message=f"Rule must be callable: {entry!r} / 规则必须可调用: {entry!r}",
            details={"field": field, "rule": repr(entry)},
        )
    if _accepts_record(entry):
        return entry

    def single(value: Any, record: Record | None = None) -> str | None:
        return entry(value)

    return single


def normalize_rules(entry: Any, *, field: str | None = None) -> tuple[Rule, ...]:
    """Normalize a schema entry (bare rule or rule sequence) into a rule tuple.
    将 schema 条目（单条规则或规则序列）规范化为规则元组。

    Args:
        entry: Schema entry.
            schema 条目。
        field: Field name used in error details.
            用于错误详情的字段名。
    Returns:
        tuple[Rule, ...]: Ordered rules.
            有序规则元组。
    Raises:
        SchemaError: When any item is not a rule.
            任一项不是规则时抛出 SchemaError。
    """
    if isinstance(entry, str) or callable(entry):
        items: Sequence[Any] = [entry]
    elif isinstance(entry, Sequence):
        items = entry
    else:
        raise SchemaError(
            message=f"Schema entry must be a rule or a list of rules: {field} / schema 条目必须是规则或规则列表: {field}",
            details={"field": field, "entry": repr(entry)},
        )
    return tuple(as_rule(item, field=field) for item in items)
