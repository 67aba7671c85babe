"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_validation_core.py
@DateTime: 2026-10-19
@Docs: Tests for validation_core.py module.
validation_core.py 模块测试。
"""

from form_rules.validation_core import ErrorCollector, has_errors, merge_error_maps, visible_errors


class TestErrorCollector:
    """Tests for ErrorCollector.
    ErrorCollector 测试。
    """

    def test_add_records_message(self) -> None:
        ec = ErrorCollector()
        assert ec.add("name", "Value Required") is True
        assert ec.errors == {"name": "Value Required"}
        assert ec.ok is False

    def test_empty_message_ignored(self) -> None:
        """Valid fields never appear in the map / 有效字段不会出现在映射中。"""
        ec = ErrorCollector()
        assert ec.add("name", None) is False
        assert ec.add("email", "") is False
        assert ec.errors == {}
        assert ec.ok is True

    def test_first_message_wins(self) -> None:
        ec = ErrorCollector()
        ec.add("name", "first")
        assert ec.add("name", "second") is False
        assert ec.errors == {"name": "first"}

    def test_update(self) -> None:
        ec = ErrorCollector()
        ec.update({"a": "x", "b": None})
        assert ec.to_dict() == {"a": "x"}

    def test_to_dict_is_copy(self) -> None:
        ec = ErrorCollector()
        ec.add("a", "x")
        out = ec.to_dict()
        out["b"] = "y"
        assert ec.errors == {"a": "x"}


class TestHelpers:
    """Tests for error-map helpers.
    错误映射辅助函数测试。
    """

    def test_has_errors(self) -> None:
        assert has_errors({"a": "x"}) is True
        assert has_errors({}) is False
        assert has_errors(None) is False

    def test_visible_errors_only_touched(self) -> None:
        errors = {"name": "Value Required", "email": "Value Required"}
        assert visible_errors(errors, ["email", "bio"]) == {"email": "Value Required"}

    def test_merge_first_wins(self) -> None:
        merged = merge_error_maps({"a": "one"}, {"a": "two", "b": "three"}, {"c": None})
        assert merged == {"a": "one", "b": "three"}
