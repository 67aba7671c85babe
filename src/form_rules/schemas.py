"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: schemas.py
@DateTime: 2026-10-19
@Docs: Pydantic response models for validation results.
校验结果的 Pydantic 响应模型。
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field


class FieldErrorItem(BaseModel):
    """
    Field error item.
    字段错误项。

    Attributes:
        field: Field name.
        field: 字段名。
        message: Error message.
        message: 错误消息。
    """

    field: str
    message: str


class ValidateResponse(BaseModel):
    """
    Validate response.
    校验响应。

    Attributes:
        valid: Whether the record is submittable.
        valid: 记录是否可提交。
        errors: Sparse error map.
        errors: 稀疏错误映射。
    """

    valid: bool
    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def items(self) -> list[FieldErrorItem]:
        return [FieldErrorItem(field=k, message=v) for k, v in self.errors.items()]

    @classmethod
    def from_error_map(cls, error_map: Mapping[str, str]) -> "ValidateResponse":
        """Build a response from an error map.
        根据错误映射构建响应。
        """
        errors = {str(k): str(v) for k, v in error_map.items() if v}
        return cls(valid=not errors, errors=errors)


class RowErrorItem(BaseModel):
    """
    Row error item (batch validation).
    行错误项（批量校验）。

    Attributes:
        row_number: Row number (1-based).
        row_number: 行号（从 1 开始）。
        field: Field name.
        field: 字段名。
        message: Error message.
        message: 错误消息。
        value: Offending value (optional).
        value: 出错的值（可选）。
    """

    row_number: int
    field: str
    message: str
    value: Any | None = None


class ValidateRowsResponse(BaseModel):
    """
    Batch validate response.
    批量校验响应。

    Attributes:
        total_rows: Number of rows checked.
        total_rows: 校验的行数。
        error_rows: Number of rows with at least one error.
        error_rows: 至少有一个错误的行数。
        errors: Row error items.
        errors: 行错误项列表。
    """

    total_rows: int
    error_rows: int
    errors: list[RowErrorItem] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    @classmethod
    def from_errors(cls, errors: Iterable[Mapping[str, Any]], *, total_rows: int) -> "ValidateRowsResponse":
        """Build a response from row error dicts.
        根据行错误字典构建响应。
        """
        items = [RowErrorItem.model_validate(dict(e)) for e in errors]
        return cls(
            total_rows=int(total_rows),
            error_rows=len({i.row_number for i in items}),
            errors=items,
        )
