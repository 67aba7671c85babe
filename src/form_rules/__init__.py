"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: Package exports for form_rules.
form_rules 包导出定义。
"""

from form_rules.combinators import join, normalize_rules
from form_rules.config import FormRulesConfig, resolve_config
from form_rules.dates import DatetimeCodec, system_clock
from form_rules.exceptions import FormRulesError, SchemaError, ValidationError
from form_rules.helpers import clear_fields, iter_records, patch_record, records_to_dicts
from form_rules.predicates import (
    contains_lowercase,
    contains_number,
    contains_special_char,
    contains_two_words,
    contains_uppercase,
    in_future,
    is_email,
    is_in_future,
    is_integer,
    is_valid_date,
    matches,
    matches_field,
    max_length,
    min_length,
    no_later_than,
    one_of,
    pattern_rule,
    validate_one_of,
    value_required,
)
from form_rules.schemas import FieldErrorItem, RowErrorItem, ValidateResponse, ValidateRowsResponse
from form_rules.validation import summarize_rows, validate_frame, validate_rows
from form_rules.validation_core import ErrorCollector, has_errors, merge_error_maps, visible_errors
from form_rules.validator import Validator, create_validator, validate

__all__ = [
    "create_validator",
    "validate",
    "Validator",
    "join",
    "normalize_rules",
    "value_required",
    "min_length",
    "max_length",
    "contains_special_char",
    "is_integer",
    "contains_number",
    "contains_lowercase",
    "contains_uppercase",
    "contains_two_words",
    "is_email",
    "is_valid_date",
    "is_in_future",
    "in_future",
    "validate_one_of",
    "one_of",
    "matches",
    "matches_field",
    "no_later_than",
    "pattern_rule",
    "ErrorCollector",
    "has_errors",
    "visible_errors",
    "merge_error_maps",
    "FieldErrorItem",
    "ValidateResponse",
    "RowErrorItem",
    "ValidateRowsResponse",
    "validate_rows",
    "validate_frame",
    "summarize_rows",
    "FormRulesError",
    "SchemaError",
    "ValidationError",
    "FormRulesConfig",
    "resolve_config",
    "DatetimeCodec",
    "system_clock",
    "iter_records",
    "records_to_dicts",
    "patch_record",
    "clear_fields",
]
