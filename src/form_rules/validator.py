"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: validator.py
@DateTime: 2026-10-19
@Docs: Schema-driven validator.
基于 schema 的校验器。

`create_validator(schema)` normalizes the schema once and returns a callable
that maps a record to a sparse error map. The validator holds no mutable state
and may be shared between threads.
`create_validator(schema)` 只规范化一次 schema，返回将记录映射为稀疏错误映射的
可调用对象。校验器不持有可变状态，可在线程间共享。

Examples:
        >>> from form_rules import create_validator, value_required, is_email
        >>> validate = create_validator({"email": [value_required, is_email]})
        >>> validate({})
        {'email': 'Value Required'}
        >>> validate({"email": "a@b.com"})
        {}
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from form_rules.combinators import join, normalize_rules
from form_rules.exceptions import SchemaError, ValidationError
from form_rules.typing import ErrorMap, Record, Rule, Schema
from form_rules.validation_core import ErrorCollector

logger = logging.getLogger(__name__)


class Validator:
    """
    Validator
    校验器

    Callable mapping a record to an error map.
    将记录映射为错误映射的可调用对象。

    Attributes:
        rules: Read-only mapping of field -> ordered rules.
            只读的字段 -> 有序规则映射。
    """

    __slots__ = ("_rules", "_combined")

    def __init__(self, schema: Schema) -> None:
        if not isinstance(schema, Mapping):
            raise SchemaError(
                message="Schema must be a mapping of field -> rules / schema 必须是字段到规则的映射",
                details={"schema": repr(schema)},
            )
        normalized: dict[str, tuple[Rule, ...]] = {}
        for name, entry in schema.items():
            normalized[str(name)] = normalize_rules(entry, field=str(name))
        self._rules = MappingProxyType(normalized)
        self._combined = MappingProxyType({name: join(rules) for name, rules in normalized.items()})
        logger.debug("Validator created for %d field(s): %s", len(normalized), ", ".join(normalized))

    @property
    def rules(self) -> Mapping[str, tuple[Rule, ...]]:
        return self._rules

    @property
    def fields(self) -> tuple[str, ...]:
        """Return the field names declared in the schema.
        返回 schema 中声明的字段名。
        """
        return tuple(self._rules)

    def __call__(self, record: Record | None = None) -> ErrorMap:
        """Validate a record.
        校验一条记录。

        Args:
            record: Flat record (field -> value); None is treated as empty.
                扁平记录（字段 -> 值）；None 视为空记录。

        Returns:
            ErrorMap: Errors for failing fields only.
                仅包含失败字段的错误映射。
        """
        data: Record = record if record is not None else {}
        collector = ErrorCollector()
        for name, rule in self._combined.items():
            collector.add(name, rule(data.get(name), data))
        return collector.errors

    def is_valid(self, record: Record | None = None) -> bool:
        """Return True when the record has no errors (submittable).
        记录没有错误（可提交）时返回 True。
        """
        return not self(record)

    def validate_or_raise(self, record: Record | None = None) -> Record:
        """Validate a record, raising when it has errors.
        校验记录，存在错误时抛出异常。

        Args:
            record: Flat record.
                扁平记录。

        Returns:
            Record: The record itself when valid.
                记录有效时原样返回。

        Raises:
            ValidationError: When the error map is not empty.
                错误映射非空时抛出 ValidationError。
        """
        errors = self(record)
        if errors:
            raise ValidationError(details=errors)
        return record if record is not None else {}

    def __repr__(self) -> str:
        return f"Validator(fields={list(self._rules)!r})"


def create_validator(schema: Schema) -> Validator:
    """Create a validator from a schema.
    根据 schema 创建校验器。

    Args:
        schema: Mapping of field -> rule or ordered list of rules.
            字段 -> 单条规则或有序规则列表的映射。

    Returns:
        Validator: Callable mapping a record to an error map.
            将记录映射为错误映射的可调用对象。

    Raises:
        SchemaError: When the schema is malformed.
            schema 格式错误时抛出 SchemaError。
    """
    return Validator(schema)


def validate(schema: Schema, record: Record | None = None) -> ErrorMap:
    """One-shot helper: build a validator and run it once.
    一次性辅助：构建校验器并执行一次。
    """
    return create_validator(schema)(record)
