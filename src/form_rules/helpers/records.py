"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: records.py
@DateTime: 2026-10-19
@Docs: Record helpers: iteration and clone-and-patch updates.
记录辅助：迭代与“复制后修改”式更新。

Records are never mutated in place; every helper returns a new dict.
记录从不原地修改；每个辅助函数都返回新的字典。
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any


def iter_records(data: Any) -> Iterator[dict[str, Any]]:
    """Iterate records as fresh dictionaries.
    以新字典形式迭代记录。

    Args:
        data: Polars DataFrame, iterable of mappings, or mapping.
            Polars DataFrame、映射记录可迭代对象或单个映射。
    """
    if _is_polars_df(data):
        yield from data.to_dicts()
        return
    if isinstance(data, Mapping):
        yield dict(data)
        return
    if isinstance(data, (str, bytes)):
        raise TypeError("records must be iterable mappings / 记录必须是可迭代的映射")
    if isinstance(data, Iterable):
        for record in data:
            if not isinstance(record, Mapping):
                raise TypeError("records must be iterable mappings / 记录必须是可迭代的映射")
            yield dict(record)
        return
    raise TypeError("records must be iterable mappings / 记录必须是可迭代的映射")


def records_to_dicts(data: Any) -> list[dict[str, Any]]:
    """Convert record data into a list of dictionaries.
    将记录数据转换为字典列表。

    Args:
        data: Polars DataFrame, iterable of mappings, or mapping.
            Polars DataFrame、映射记录可迭代对象或单个映射。
    Returns:
        list[dict[str, Any]]: List of record dictionaries.
            记录字典列表。
    """
    return list(iter_records(data))


def patch_record(record: Mapping[str, Any] | None, changes: Mapping[str, Any] | None = None, **kwargs: Any) -> dict[str, Any]:
    """Return a copy of the record with the given fields replaced.
    返回替换了指定字段的记录副本。

    Args:
        record: Source record (left untouched).
            源记录（不会被修改）。
        changes: Field -> new value.
            字段 -> 新值。
        **kwargs: Extra field changes, applied after `changes`.
            额外的字段修改，在 `changes` 之后应用。
    Returns:
        dict[str, Any]: New record.
            新记录。

    Examples:
        >>> state = {"email": None, "bio": "hi"}
        >>> patch_record(state, {"email": "a@b.com"})
        {'email': 'a@b.com', 'bio': 'hi'}
        >>> state["email"] is None
        True
    """
    patched = dict(record or {})
    if changes:
        patched.update(changes)
    patched.update(kwargs)
    return patched


def clear_fields(record: Mapping[str, Any] | None, fields: Iterable[str]) -> dict[str, Any]:
    """Return a copy of the record with the given fields reset to None.
    返回将指定字段重置为 None 的记录副本。

    Args:
        record: Source record (left untouched).
            源记录（不会被修改）。
        fields: Field names to reset.
            要重置的字段名。
    """
    return patch_record(record, {name: None for name in fields})


def _is_polars_df(value: Any) -> bool:
    """Return True if the value is a Polars DataFrame.
    如果值是 Polars DataFrame 则返回 True。

    polars is imported lazily so that it stays an optional dependency.
    按需延迟导入 polars，使其保持为可选依赖。
    """
    try:
        import polars as pl
    except ImportError:
        return False
    return isinstance(value, pl.DataFrame)
