"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: validation.py
@DateTime: 2026-10-19
@Docs: Batch validation facade with optional backend.
批量校验门面（可选后端）。
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from form_rules.exceptions import FormRulesError
from form_rules.helpers.records import iter_records
from form_rules.schemas import ValidateRowsResponse
from form_rules.typing import ErrorMap, Record, Validator

logger = logging.getLogger(__name__)


def _load_backend() -> Any:
    try:
        from form_rules import validation_polars

        return validation_polars
    except Exception as exc:  # pragma: no cover / 覆盖忽略
        raise FormRulesError(
            message="Missing optional dependencies for frame validation. Install extras: polars / 缺少数据框校验可选依赖，请安装: polars",
            details={"error": str(exc)},
            error_code="missing_dependency",
        ) from exc


def row_errors(row_number: int, record: Record, error_map: ErrorMap) -> list[dict[str, Any]]:
    """
    Convert one record's error map into row error items.
    将单条记录的错误映射转换为行错误项。

    Args:
        row_number: Row number (1-based).
        row_number: 行号（从 1 开始）。
        record: The validated record.
        record: 被校验的记录。
        error_map: Error map for the record.
        error_map: 该记录的错误映射。

    Returns:
        list[dict[str, Any]]: Error list.
        list[dict[str, Any]]: 错误列表。
    """
    errors: list[dict[str, Any]] = []
    for field, message in error_map.items():
        item: dict[str, Any] = {"row_number": int(row_number), "field": field, "message": message}
        value = record.get(field)
        if value is not None:
            item["value"] = value
        errors.append(item)
    return errors


def validate_rows(rows: Iterable[Mapping[str, Any]] | Any, validator: Validator, *, start: int = 1) -> list[dict[str, Any]]:
    """
    Validate many records with one validator.
    使用同一个校验器校验多条记录。

    Args:
        rows: Iterable of mappings (or a single mapping / DataFrame).
        rows: 映射的可迭代对象（或单个映射 / 数据框）。
        validator: Validator built by `create_validator`.
        validator: 由 `create_validator` 构建的校验器。
        start: Number of the first row.
        start: 第一行的行号。

    Returns:
        list[dict[str, Any]]: Error list.
        list[dict[str, Any]]: 错误列表。
    """
    errors: list[dict[str, Any]] = []
    total = 0
    for offset, record in enumerate(iter_records(rows)):
        total += 1
        errors.extend(row_errors(start + offset, record, validator(record)))
    logger.debug("Validated %d row(s), %d error(s)", total, len(errors))
    return errors


def validate_frame(df: Any, validator: Validator) -> list[dict[str, Any]]:
    """
    Validate every row of a DataFrame.
    校验数据框的每一行。

    Args:
        df: Input DataFrame (uses `row_number` when present).
        df: 输入数据框（存在 `row_number` 列时使用该列）。
        validator: Validator built by `create_validator`.
        validator: 由 `create_validator` 构建的校验器。

    Returns:
        list[dict[str, Any]]: Error list.
        list[dict[str, Any]]: 错误列表。
    """
    backend = _load_backend()
    return backend.validate_frame(df, validator)


def summarize_rows(errors: Iterable[Mapping[str, Any]], *, total_rows: int) -> ValidateRowsResponse:
    """
    Build a batch validate response.
    构建批量校验响应。

    Args:
        errors: Row error items.
        errors: 行错误项。
        total_rows: Number of rows checked.
        total_rows: 校验的行数。

    Returns:
        ValidateRowsResponse: Response model.
        ValidateRowsResponse: 响应模型。
    """
    return ValidateRowsResponse.from_errors(errors, total_rows=total_rows)
