"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: patterns.py
@DateTime: 2026-10-19
@Docs: Precompiled patterns used by format rules.
格式规则使用的预编译正则。

All patterns are matched against the whole value (`fullmatch`).
所有正则均对整个值进行匹配（`fullmatch`）。
"""

import re

INTEGER_RE = re.compile(r"\+?(0|[1-9]\d*)")
NUMBER_RE = re.compile(r"(?=.*[0-9]).+")
LOWERCASE_RE = re.compile(r"(?=.*[a-z]).+")
UPPERCASE_RE = re.compile(r"(?=.*[A-Z]).+")
# ASCII so that accented letters count as special characters.
SPECIAL_CHAR_RE = re.compile(r"(?=.*[_\W]).+", re.ASCII)

# Matched against the lower-cased value / 对小写后的值匹配
TWO_WORDS_RE = re.compile(r"[a-z]([-']?[a-z]+)*( [a-z]([-']?[a-z]+)*)+")

EMAIL_RE = re.compile(
    r"(([^<>()\[\]\\.,;:\s@\"]+(\.[^<>()\[\]\\.,;:\s@\"]+)*)|(\".+\"))"
    r"@"
    r"((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))"
)

# e.g. "1/31/2020 10:00 am" / 例如 "1/31/2020 10:00 am"
DATE_TIME_RE = re.compile(
    r"[0,1]?\d/(([0-2]?\d)|([3][01]))/((199\d)|([2-9]\d{3}))\s[0-2]?[0-9]:[0-5][0-9] (am|pm)?"
)
