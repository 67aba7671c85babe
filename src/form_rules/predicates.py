"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: predicates.py
@DateTime: 2026-10-19
@Docs: Predicate library for field validation.
字段校验谓词库。

Every rule is called as `rule(value, record)` and returns an error message or
None. Only `value_required` treats a missing value (None or "") as an error;
all other rules pass on a missing value so an untouched field never shows a
format error.
每条规则以 `rule(value, record)` 方式调用，返回错误消息或 None。
只有 `value_required` 会把缺失值（None 或 ""）视为错误；其余规则在值缺失时
一律通过，避免未填写的字段显示格式错误。

Examples:
        >>> from form_rules.predicates import is_email, min_length
        >>> is_email("a@b.com") is None
        True
        >>> min_length(3)("ab")
        'Value must contain at least 3 characters'
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from form_rules import patterns
from form_rules.dates import DatetimeCodec, system_clock
from form_rules.typing import Clock, Record, Rule

REQUIRED_MESSAGE = "Value Required"
MATCH_MESSAGE = "Values must match"
INVALID_DATE_MESSAGE = "Must be a valid date time."
FUTURE_MESSAGE = "Please choose a date in the future"
ORDER_MESSAGE = "The end date must come after the start date"


def no_value(value: Any) -> bool:
    """Return True when the value counts as missing (None or empty string).
    值视为缺失（None 或空字符串）时返回 True。
    """
    return value is None or value == ""


def _text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def value_required(value: Any, record: Record | None = None) -> str | None:
    """Fail when the value is missing.
    值缺失时校验失败。
    """
    if no_value(value):
        return REQUIRED_MESSAGE
    return None


@dataclass(frozen=True, slots=True)
class MinLength:
    """Minimum length rule.
    最小长度规则。
    """

    minimum: int

    def __call__(self, value: Any, record: Record | None = None) -> str | None:
        if not no_value(value) and len(_text(value)) < self.minimum:
            return f"Value must contain at least {self.minimum} characters"
        return None


@dataclass(frozen=True, slots=True)
class MaxLength:
    """Maximum length rule.
    最大长度规则。
    """

    maximum: int

    def __call__(self, value: Any, record: Record | None = None) -> str | None:
        if not no_value(value) and len(_text(value)) > self.maximum:
            return f"Value must be no more than {self.maximum} characters in length"
        return None


@dataclass(frozen=True, slots=True)
class PatternRule:
    """Rule that fails when the whole value does not match a pattern.
    整个值不匹配正则时失败的规则。

    Attributes:
        pattern: Precompiled pattern.
            预编译正则。
        message: Error message.
            错误消息。
        lowercase: Lower-case the value before matching.
            匹配前是否将值转为小写。
    """

    pattern: re.Pattern[str]
    message: str
    lowercase: bool = False

    def __call__(self, value: Any, record: Record | None = None) -> str | None:
        if no_value(value):
            return None
        text = _text(value)
        if self.lowercase:
            text = text.lower()
        if self.pattern.fullmatch(text) is None:
            return self.message
        return None


@dataclass(frozen=True, slots=True)
class OneOf:
    """Set-membership rule.
    集合成员规则。
    """

    values: tuple[Any, ...]
    message: str

    def __call__(self, value: Any, record: Record | None = None) -> str | None:
        if no_value(value) or value in self.values:
            return None
        return self.message


@dataclass(frozen=True, slots=True)
class Matches:
    """Exact-match rule against a fixed value.
    与固定值完全相等的规则。
    """

    expected: Any

    def __call__(self, value: Any, record: Record | None = None) -> str | None:
        if no_value(value) or value == self.expected:
            return None
        return MATCH_MESSAGE


@dataclass(frozen=True, slots=True)
class MatchesField:
    """Exact-match rule against a sibling field (e.g. password confirmation).
    与兄弟字段完全相等的规则（例如确认密码）。
    """

    other_field: str

    def __call__(self, value: Any, record: Record | None = None) -> str | None:
        if no_value(value):
            return None
        other = (record or {}).get(self.other_field)
        if value == other:
            return None
        return MATCH_MESSAGE


@dataclass(frozen=True, slots=True)
class InFuture:
    """Rule that fails unless the date is strictly after the clock's instant.
    日期不严格晚于时钟当前时刻时失败的规则。

    This rule is not pure across calls: it reads `clock()` on every
    evaluation. Inject a fixed clock for deterministic results.
    该规则跨调用不是纯函数：每次求值都会读取 `clock()`。
    需要确定性结果时请注入固定时钟。
    """

    clock: Clock = system_clock
    codec: DatetimeCodec = field(default_factory=DatetimeCodec.from_config)

    def __call__(self, value: Any, record: Record | None = None) -> str | None:
        if no_value(value):
            return None
        when = self.codec.try_parse(value)
        if when is None:
            return INVALID_DATE_MESSAGE
        if when > self.codec.parse(self.clock()):
            return None
        return FUTURE_MESSAGE


@dataclass(frozen=True, slots=True)
class NoLaterThan:
    """Cross-field ordering rule: the value must not precede a sibling date.
    跨字段顺序规则：值不得早于兄弟字段的日期。

    Unparsable dates are handled deterministically:
    无法解析的日期按确定性策略处理：
    - unparsable value -> INVALID_DATE_MESSAGE
      值无法解析 -> INVALID_DATE_MESSAGE
    - missing sibling -> valid (the sibling's own rules report it)
      兄弟字段缺失 -> 通过（由兄弟字段自身规则报告）
    - unparsable sibling -> ORDER_MESSAGE
      兄弟字段无法解析 -> ORDER_MESSAGE
    """

    other_field: str
    codec: DatetimeCodec = field(default_factory=DatetimeCodec.from_config)

    def __call__(self, value: Any, record: Record | None = None) -> str | None:
        if no_value(value):
            return None
        end = self.codec.try_parse(value)
        if end is None:
            return INVALID_DATE_MESSAGE
        other = (record or {}).get(self.other_field)
        if no_value(other):
            return None
        start = self.codec.try_parse(other)
        if start is None or end < start:
            return ORDER_MESSAGE
        return None


def min_length(minimum: int) -> MinLength:
    """Build a minimum length rule.
    构建最小长度规则。

    Args:
        minimum: Minimum number of characters.
            最少字符数。
    """
    return MinLength(int(minimum))


def max_length(maximum: int) -> MaxLength:
    """Build a maximum length rule.
    构建最大长度规则。

    Args:
        maximum: Maximum number of characters.
            最多字符数。
    """
    return MaxLength(int(maximum))


def pattern_rule(pattern: str | re.Pattern[str], message: str, *, lowercase: bool = False) -> PatternRule:
    """Build a custom format rule.
    构建自定义格式规则。

    Args:
        pattern: Regex pattern (compiled once here).
            正则表达式（在此处编译一次）。
        message: Error message.
            错误消息。
        lowercase: Lower-case the value before matching.
            匹配前是否将值转为小写。
    """
    compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
    return PatternRule(compiled, message, lowercase)


def validate_one_of(values: Iterable[Any], message: str) -> OneOf:
    """Build a membership rule with a custom message.
    构建带自定义消息的集合成员规则。

    Args:
        values: Allowed values.
            允许的值。
        message: Error message when the value is not allowed.
            值不被允许时的错误消息。
    """
    return OneOf(tuple(values), message)


def one_of(values: Iterable[Any]) -> OneOf:
    """Build a membership rule listing the allowed values in its message.
    构建集合成员规则，消息中列出允许的值。

    Args:
        values: Allowed values.
            允许的值。
    """
    allowed = tuple(values)
    return validate_one_of(allowed, f"Value must be one of: {', '.join(str(v) for v in allowed)}")


def matches(expected: Any) -> Matches:
    """Build a rule requiring the value to equal `expected`.
    构建要求值等于 `expected` 的规则。
    """
    return Matches(expected)


def matches_field(name: str) -> MatchesField:
    """Build a rule requiring the value to equal the sibling field `name`.
    构建要求值等于兄弟字段 `name` 的规则。
    """
    return MatchesField(name)


def in_future(*, clock: Clock | None = None, codec: DatetimeCodec | None = None) -> InFuture:
    """Build an "in the future" rule.
    构建“必须是未来时间”规则。

    Args:
        clock: Clock returning the current instant (system clock by default).
            返回当前时刻的时钟（默认系统时钟）。
        codec: Date-time codec (built from configuration by default).
            日期时间编解码器（默认根据配置构建）。
    """
    return InFuture(clock or system_clock, codec or DatetimeCodec.from_config())


def no_later_than(field_name: str, *, codec: DatetimeCodec | None = None) -> NoLaterThan:
    """Build a rule requiring the value not to precede sibling `field_name`.
    构建要求值不早于兄弟字段 `field_name` 的规则。

    Args:
        field_name: Name of the sibling date field.
            兄弟日期字段名。
        codec: Date-time codec (built from configuration by default).
            日期时间编解码器（默认根据配置构建）。
    """
    return NoLaterThan(field_name, codec or DatetimeCodec.from_config())


contains_special_char = PatternRule(patterns.SPECIAL_CHAR_RE, "Must contain 1 special character.")
is_integer = PatternRule(patterns.INTEGER_RE, "Must be an integer value.")
contains_number = PatternRule(patterns.NUMBER_RE, "Must Contain at least one number")
contains_lowercase = PatternRule(patterns.LOWERCASE_RE, "Must contain at least one lowercase letter.")
contains_uppercase = PatternRule(patterns.UPPERCASE_RE, "Must contain at least one uppercase letter")
contains_two_words = PatternRule(patterns.TWO_WORDS_RE, "Must contain two words, i.e. full name.", lowercase=True)
is_email = PatternRule(patterns.EMAIL_RE, "Must be a valid email address.")
is_valid_date = PatternRule(patterns.DATE_TIME_RE, INVALID_DATE_MESSAGE)
is_in_future = in_future()

BUILTIN_RULES: dict[str, Rule] = {
    "required": value_required,
    "special_char": contains_special_char,
    "integer": is_integer,
    "number": contains_number,
    "lowercase": contains_lowercase,
    "uppercase": contains_uppercase,
    "two_words": contains_two_words,
    "email": is_email,
    "date": is_valid_date,
    "future": is_in_future,
}
