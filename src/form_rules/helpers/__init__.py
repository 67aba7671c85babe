"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: Helper utilities.
辅助工具。
"""

from form_rules.helpers.records import clear_fields, iter_records, patch_record, records_to_dicts

__all__ = ["clear_fields", "iter_records", "patch_record", "records_to_dicts"]
