"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_helpers_records.py
@DateTime: 2026-10-19
@Docs: Tests for record helpers.
记录辅助函数测试。
"""

import polars as pl
import pytest

from form_rules.helpers import clear_fields, iter_records, patch_record, records_to_dicts


def test_iter_records_polars() -> None:
    df = pl.DataFrame({"a": [1], "b": ["x"]})
    assert list(iter_records(df)) == [{"a": 1, "b": "x"}]


def test_iter_records_mapping() -> None:
    assert list(iter_records({"a": 1})) == [{"a": 1}]


def test_records_to_dicts_iterable() -> None:
    assert records_to_dicts([{"a": 1}, {"a": 2}]) == [{"a": 1}, {"a": 2}]


def test_records_are_copies() -> None:
    source = {"a": 1}
    out = records_to_dicts([source])
    out[0]["a"] = 2
    assert source == {"a": 1}


@pytest.mark.parametrize("data", ["abc", b"abc", 42, [1, 2]])
def test_iter_records_rejects_non_mappings(data: object) -> None:
    with pytest.raises(TypeError):
        list(iter_records(data))


def test_patch_record_returns_new_record() -> None:
    """The caller's record is never mutated / 调用方的记录不会被修改。"""
    state = {"email": None, "bio": "hi"}
    patched = patch_record(state, {"email": "a@b.com"})
    assert patched == {"email": "a@b.com", "bio": "hi"}
    assert state == {"email": None, "bio": "hi"}
    assert patched is not state


def test_patch_record_kwargs_and_none() -> None:
    assert patch_record(None, {"a": 1}, b=2) == {"a": 1, "b": 2}
    assert patch_record({"a": 1}, {"a": 2}, a=3) == {"a": 3}


def test_clear_fields() -> None:
    state = {"bio": "hi", "email": "a@b.com", "is_editing": True}
    cleared = clear_fields(state, ["bio", "email"])
    assert cleared == {"bio": None, "email": None, "is_editing": True}
    assert state["bio"] == "hi"
