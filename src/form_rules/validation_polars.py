"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: validation_polars.py
@DateTime: 2026-10-19
@Docs: Polars-backed batch validation helpers.
基于 Polars 的批量校验辅助。
"""

from typing import Any

import polars as pl

from form_rules.typing import Validator
from form_rules.validation import row_errors


def with_row_numbers(df: pl.DataFrame, *, column: str = "row_number") -> pl.DataFrame:
    """
    Ensure the DataFrame has a 1-based row number column.
    确保数据框包含从 1 开始的行号列。

    Args:
        df: Input DataFrame.
        df: 输入数据框。
        column: Row number column name.
        column: 行号列名。

    Returns:
        pl.DataFrame: DataFrame with the row number column first.
        pl.DataFrame: 行号列位于首列的数据框。
    """
    if column in df.columns:
        return df
    return df.with_row_index(name=column, offset=1)


def validate_frame(df: pl.DataFrame, validator: Validator) -> list[dict[str, Any]]:
    """
    Validate every row of a DataFrame.
    校验数据框的每一行。

    Args:
        df: Input DataFrame (row_number column optional).
        df: 输入数据框（row_number 列可选）。
        validator: Validator built by `create_validator`.
        validator: 由 `create_validator` 构建的校验器。

    Returns:
        list[dict[str, Any]]: Error list.
        list[dict[str, Any]]: 错误列表。
    """
    errors: list[dict[str, Any]] = []
    if df.is_empty():
        return errors
    numbered = with_row_numbers(df)
    for r in numbered.to_dicts():
        row_number = int(r.pop("row_number") or 0)
        errors.extend(row_errors(row_number, r, validator(r)))
    return errors


def error_frame(errors: list[dict[str, Any]]) -> pl.DataFrame:
    """
    Convert row error items into a DataFrame.
    将行错误项转换为数据框。

    Args:
        errors: Row error items.
        errors: 行错误项。

    Returns:
        pl.DataFrame: Columns row_number, field, message.
        pl.DataFrame: 包含 row_number、field、message 列。
    """
    return pl.DataFrame(
        {
            "row_number": [int(e["row_number"]) for e in errors],
            "field": [str(e["field"]) for e in errors],
            "message": [str(e["message"]) for e in errors],
        },
        schema={"row_number": pl.Int64, "field": pl.String, "message": pl.String},
    )
