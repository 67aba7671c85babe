"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-10-19
@Docs: Form-rules error hierarchy.
表单校验规则异常体系。

Validation failures are returned as data (an error map), never raised.
These exceptions only cover schema mistakes and submission boundaries.
校验失败以数据（错误映射）形式返回，不会抛出；
这些异常仅用于 schema 定义错误与提交边界。
"""

from typing import Any


class FormRulesError(Exception):
    """
    Form rules errors.
    表单校验规则异常。

    Attributes:
        message: Error message.
        message: 错误消息。
        status_code: HTTP status code.
        status_code: HTTP 状态码。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
        error_code: str = "form_rules_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details
        self.error_code = error_code


class SchemaError(FormRulesError):
    """
    Schema definition error.
    schema 定义错误。

    Raised when a schema entry is not a rule or a sequence of rules.
    当 schema 条目既不是规则也不是规则序列时抛出。
    """

    def __init__(
        self,
        *,
        message: str,
        status_code: int = 500,
        details: Any | None = None,
        error_code: str = "invalid_schema",
    ) -> None:
        super().__init__(message=message, status_code=status_code, details=details, error_code=error_code)


class ValidationError(FormRulesError):
    """
    Validation error raised at the submission boundary.
    提交边界抛出的校验错误。

    `details` carries the error map (field -> message).
    `details` 携带错误映射（字段 -> 消息）。
    """

    def __init__(
        self,
        *,
        message: str = "Validation failed / 校验失败",
        status_code: int = 422,
        details: dict[str, str] | None = None,
        error_code: str = "validation_failed",
    ) -> None:
        super().__init__(message=message, status_code=status_code, details=details or {}, error_code=error_code)

    @property
    def errors(self) -> dict[str, str]:
        """Return the error map.
        返回错误映射。
        """
        return dict(self.details)
