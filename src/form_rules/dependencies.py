"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: dependencies.py
@DateTime: 2026-10-19
@Docs: FastAPI integration: validated request bodies and error handlers.
FastAPI 集成：经过校验的请求体与异常处理器。

Examples:
        >>> from fastapi import Depends, FastAPI
        >>> from form_rules.forms import profile_validator
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
        >>> @app.put("/profile")
        ... async def update(record: dict = Depends(validated_body(profile_validator()))) -> dict:
        ...     return record
"""

from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from form_rules.exceptions import FormRulesError, ValidationError
from form_rules.typing import Validator


def validated_body(validator: Validator) -> Callable[[Request], Awaitable[dict[str, Any]]]:
    """Build a dependency returning the JSON body once it passes validation.
    构建依赖项：请求 JSON 体通过校验后返回该记录。

    Args:
        validator: Validator built by `create_validator`.
            由 `create_validator` 构建的校验器。
    Returns:
        Callable: FastAPI dependency.
            FastAPI 依赖项。

    Raises:
        ValidationError: When the body is not a JSON object or has errors.
            请求体不是 JSON 对象或存在错误时抛出 ValidationError。
    """

    async def _dependency(request: Request) -> dict[str, Any]:
        try:
            body = await request.json()
        except ValueError as exc:
            raise ValidationError(
                message="Request body must be valid JSON / 请求体必须是合法 JSON",
                error_code="invalid_body",
            ) from exc
        if not isinstance(body, dict):
            raise ValidationError(
                message="Request body must be a JSON object / 请求体必须是 JSON 对象",
                error_code="invalid_body",
            )
        errors = validator(body)
        if errors:
            raise ValidationError(details=errors)
        return body

    return _dependency


async def form_rules_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a FormRulesError as JSON.
    将 FormRulesError 渲染为 JSON。
    """
    if not isinstance(exc, FormRulesError):  # pragma: no cover / 覆盖忽略
        raise exc
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "error_code": exc.error_code, "details": exc.details},
    )


def register_exception_handlers(app: FastAPI) -> FastAPI:
    """Register the FormRulesError handler on an app.
    在应用上注册 FormRulesError 处理器。

    Args:
        app: FastAPI application.
            FastAPI 应用。
    Returns:
        FastAPI: The same application.
            同一个应用。
    """
    app.add_exception_handler(FormRulesError, form_rules_error_handler)
    return app
