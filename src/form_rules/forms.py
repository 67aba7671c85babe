"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: forms.py
@DateTime: 2026-10-19
@Docs: Ready-made schemas for the event, profile and signup forms.
活动、个人资料与注册表单的预置 schema。
"""

from form_rules.predicates import (
    contains_lowercase,
    contains_number,
    contains_special_char,
    contains_two_words,
    contains_uppercase,
    in_future,
    is_email,
    is_valid_date,
    matches_field,
    max_length,
    min_length,
    no_later_than,
    value_required,
)
from form_rules.typing import Clock, Schema
from form_rules.validator import Validator, create_validator

PROFILE_FORM_SCHEMA: Schema = {
    "email": [value_required, is_email],
    "bio": max_length(500),
    "employer": max_length(120),
    "avatar": max_length(2048),
}

SIGNUP_FORM_SCHEMA: Schema = {
    "name": [value_required, contains_two_words],
    "email": [value_required, is_email],
    "password": [
        value_required,
        min_length(8),
        contains_number,
        contains_lowercase,
        contains_uppercase,
        contains_special_char,
    ],
    "password_confirmation": [value_required, matches_field("password")],
}


def event_form_schema(clock: Clock | None = None) -> Schema:
    """Return the event-creation form schema.
    返回活动创建表单 schema。

    Args:
        clock: Clock for the start-date "in the future" check.
            开始日期“未来时间”检查使用的时钟。
    """
    return {
        "name": [value_required, max_length(80)],
        "type": value_required,
        "host": [value_required, contains_two_words],
        "location": value_required,
        "start_date": [value_required, is_valid_date, in_future(clock=clock)],
        "end_date": [value_required, is_valid_date, no_later_than("start_date")],
        "guests": max_length(1000),
    }


EVENT_FORM_SCHEMA: Schema = event_form_schema()


def event_validator(clock: Clock | None = None) -> Validator:
    """Validator for the event-creation form.
    活动创建表单校验器。
    """
    return create_validator(event_form_schema(clock))


def profile_validator() -> Validator:
    """Validator for the profile editor.
    个人资料编辑校验器。
    """
    return create_validator(PROFILE_FORM_SCHEMA)


def signup_validator() -> Validator:
    """Validator for the signup form.
    注册表单校验器。
    """
    return create_validator(SIGNUP_FORM_SCHEMA)
