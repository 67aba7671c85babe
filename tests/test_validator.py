"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_validator.py
@DateTime: 2026-10-19
@Docs: Tests for validator.py module.
validator.py 模块测试。
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pytest

from form_rules.exceptions import SchemaError, ValidationError
from form_rules.predicates import (
    ORDER_MESSAGE,
    REQUIRED_MESSAGE,
    contains_two_words,
    is_email,
    min_length,
    no_later_than,
    one_of,
    value_required,
)
from form_rules.validator import Validator, create_validator, validate


def _schema() -> dict[str, Any]:
    return {
        "name": [value_required, contains_two_words],
        "email": [value_required, is_email],
        "nickname": min_length(3),
        "role": one_of(["admin", "guest"]),
        "end": no_later_than("start"),
    }


class TestCreateValidator:
    """Tests for create_validator.
    create_validator 测试。
    """

    def test_returns_validator(self) -> None:
        v = create_validator(_schema())
        assert isinstance(v, Validator)
        assert v.fields == ("name", "email", "nickname", "role", "end")

    def test_empty_record_reports_required_only(self) -> None:
        """Only required fields fail on an empty record / 空记录只报告必填字段。"""
        assert create_validator(_schema())({}) == {"name": REQUIRED_MESSAGE, "email": REQUIRED_MESSAGE}

    def test_none_record_is_empty(self) -> None:
        v = create_validator(_schema())
        assert v(None) == v({})
        assert v() == v({})

    def test_valid_record_is_empty_map(self) -> None:
        record = {"name": "John Smith", "email": "john@example.com", "nickname": "johnny", "role": "admin"}
        assert create_validator(_schema())(record) == {}

    def test_first_error_per_field(self) -> None:
        v = create_validator({"name": [value_required, min_length(3), contains_two_words]})
        assert v({"name": "Jo"}) == {"name": "Value must contain at least 3 characters"}

    def test_fields_are_isolated(self) -> None:
        """One field's failure does not affect another / 一个字段失败不影响其他字段。"""
        errors = create_validator(_schema())({"name": "John Smith", "email": "nope", "role": "root"})
        assert errors == {"email": "Must be a valid email address.", "role": "Value must be one of: admin, guest"}

    def test_cross_field_rule(self) -> None:
        v = create_validator({"end": no_later_than("start")})
        assert v({"start": "01/01/2020 10:00 am", "end": "01/01/2019 10:00 am"}) == {"end": ORDER_MESSAGE}
        assert v({"start": "01/01/2019 10:00 am", "end": "01/01/2020 10:00 am"}) == {}

    def test_extra_record_fields_ignored(self) -> None:
        assert create_validator({"email": is_email})({"email": "a@b.com", "other": "??"}) == {}

    def test_single_arg_user_rule(self) -> None:
        v = create_validator({"age": lambda v: None if int(v) >= 18 else "Too young"})
        assert v({"age": "16"}) == {"age": "Too young"}
        assert v({"age": "21"}) == {}

    def test_rule_names(self) -> None:
        v = create_validator({"email": ["required", "email"]})
        assert v({}) == {"email": REQUIRED_MESSAGE}

    def test_schema_not_mutated(self) -> None:
        rules = [value_required, is_email]
        schema = {"email": rules, "name": value_required}
        create_validator(schema)({"email": "x"})
        assert schema == {"email": [value_required, is_email], "name": value_required}
        assert schema["email"] is rules

    def test_record_not_mutated(self) -> None:
        record = {"email": "x", "name": ""}
        create_validator(_schema())(record)
        assert record == {"email": "x", "name": ""}

    def test_rules_read_only(self) -> None:
        v = create_validator({"email": is_email})
        assert v.rules["email"] == (is_email,)
        with pytest.raises(TypeError):
            v.rules["email"] = (value_required,)  # type: ignore[index]

    def test_later_schema_changes_do_not_leak(self) -> None:
        schema: dict[str, Any] = {"email": is_email}
        v = create_validator(schema)
        schema["name"] = value_required
        assert v({}) == {}

    def test_result_is_fresh_dict(self) -> None:
        v = create_validator({"email": value_required})
        first = v({})
        first["email"] = "changed"
        first["other"] = "added"
        assert v({}) == {"email": REQUIRED_MESSAGE}

    def test_non_mapping_schema_raises(self) -> None:
        with pytest.raises(SchemaError):
            create_validator([value_required])  # type: ignore[arg-type]

    def test_bad_entry_raises_at_construction(self) -> None:
        with pytest.raises(SchemaError) as exc_info:
            create_validator({"email": 123})
        assert exc_info.value.details["field"] == "email"

    def test_repr(self) -> None:
        assert "email" in repr(create_validator({"email": is_email}))


class TestValidatorProperties:
    """Determinism and idempotence.
    确定性与幂等性。
    """

    def test_deterministic(self) -> None:
        v = create_validator(_schema())
        record = {"name": "John", "email": "bad", "end": "01/01/2019 10:00 am", "start": "01/01/2020 10:00 am"}
        assert v(record) == v(dict(record))

    def test_idempotent_on_valid_record(self) -> None:
        v = create_validator(_schema())
        record = {"name": "John Smith", "email": "a@b.com"}
        assert v(record) == {}
        assert v(record) == {}

    def test_unchanged_field_keeps_message(self) -> None:
        v = create_validator(_schema())
        record = {"name": "John Smith", "email": "bad"}
        first = v(record)
        second = v({**record, "nickname": "okay"})
        assert second["email"] == first["email"]

    def test_concurrent_calls(self) -> None:
        """A validator can be shared between threads / 校验器可在线程间共享。"""
        v = create_validator(_schema())
        records = [{"name": "John Smith", "email": "a@b.com"}, {"email": "bad"}] * 50
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(v, records))
        assert results[0] == {}
        assert results[1] == {"name": REQUIRED_MESSAGE, "email": "Must be a valid email address."}
        assert all(r == results[i % 2] for i, r in enumerate(results))


class TestSubmission:
    """Tests for is_valid / validate_or_raise.
    is_valid / validate_or_raise 测试。
    """

    def test_is_valid(self) -> None:
        v = create_validator({"email": [value_required, is_email]})
        assert v.is_valid({"email": "a@b.com"}) is True
        assert v.is_valid({}) is False

    def test_validate_or_raise_returns_record(self) -> None:
        record = {"email": "a@b.com"}
        assert create_validator({"email": is_email}).validate_or_raise(record) is record

    def test_validate_or_raise_raises(self) -> None:
        v = create_validator({"email": [value_required, is_email]})
        with pytest.raises(ValidationError) as exc_info:
            v.validate_or_raise({"email": "bad"})
        assert exc_info.value.status_code == 422
        assert exc_info.value.errors == {"email": "Must be a valid email address."}


class TestValidateHelper:
    """Tests for validate.
    validate 测试。
    """

    def test_one_shot(self) -> None:
        assert validate({"email": value_required}, {}) == {"email": REQUIRED_MESSAGE}
