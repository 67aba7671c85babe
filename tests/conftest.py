"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-10-19
@Docs: Shared test fixtures for the form-rules test suite.
测试套件的公共 fixtures。
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any

import pytest

FIXED_NOW = datetime(2024, 6, 1, 12, 0)


@pytest.fixture
def fixed_now() -> datetime:
    """The instant returned by `fixed_clock`.
    `fixed_clock` 返回的时刻。
    """
    return FIXED_NOW


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """A clock frozen at FIXED_NOW.
    固定在 FIXED_NOW 的时钟。
    """
    return lambda: FIXED_NOW


@pytest.fixture
def event_record() -> dict[str, Any]:
    """A valid event-form record relative to FIXED_NOW.
    相对 FIXED_NOW 有效的活动表单记录。
    """
    return {
        "name": "Summer Party",
        "type": "Party",
        "host": "John Smith",
        "location": "Rooftop",
        "start_date": "06/15/2024 06:00 pm",
        "end_date": "06/15/2024 11:30 pm",
        "guests": "Jane Doe",
    }


@pytest.fixture
def signup_record() -> dict[str, Any]:
    """A valid signup-form record.
    有效的注册表单记录。
    """
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "password": "Secr3t!pass",
        "password_confirmation": "Secr3t!pass",
    }
