from __future__ import annotations
import logging
from typing import Optional
import regex as re
from models import FIELD_NAMES, ParsedLogLine

logger = logging.getLogger(__name__)

# Combined log format plus a trailing numeric code:
# %h %l %u [%t] "%r" %>s %b "%{Referer}i" "%{User-agent}i" <code>

# Example:
# 127.0.0.1 - frank [10/Oct/2000:13:55:36 -0700] "GET /apache_pb.gif HTTP/1.0" 200 2326 "http://www.example.com/start.html" "Mozilla/4.08" 15

_COMBINED_RE = re.compile(
    r'^(?P<host>\S+) '
    r'(?P<client_identity>\S+) '
    r'(?P<user_id>\S+) '
    r'\[(?P<date_time>[\w:/]+\s[+\-]\d{4})\] '
    r'"(?P<http_method>\S+) (?P<requested_url>\S+) (?P<http_protocol_version>\S+)" '
    r'(?P<http_status_code>\d{3}) '
    r'(?P<response_body_size>\S+) '
    r'"(?P<referrer_url>\S+)" '
    r'"(?P<agent>[^"]+)" '
    r'(?P<code>\d+)'
)

_INT_FIELDS = ("http_status_code", "response_body_size", "code")
_INT_RE = re.compile(r"[+\-]?[0-9]+")


class FieldConversionError(ValueError):
    """A captured field matched the grammar but is not an integer."""

    def __init__(self, field: str, value: str):
        super().__init__(f"{field}={value!r} is not an integer")
        self.field = field
        self.value = value


def _to_int(field: str, value: str) -> int:
    # int() alone would also take "1_000" and non-ASCII digits
    if not _INT_RE.fullmatch(value):
        raise FieldConversionError(field, value)
    return int(value)


def _chomp(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse_combined_line(line: str) -> Optional[ParsedLogLine]:
    m = _COMBINED_RE.match(_chomp(line))
    if not m:
        return None

    gd = m.groupdict()
    try:
        for name in _INT_FIELDS:
            gd[name] = _to_int(name, gd[name])
    except FieldConversionError as e:
        # treated like any other non-matching line
        logger.debug("passing line through: %s", e)
        return None

    return ParsedLogLine(
        field_lengths=[len(m.group(name)) for name in FIELD_NAMES],
        **gd,
    )
