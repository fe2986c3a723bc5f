"""Tests for parsers/combined.py"""

import pytest

from models import FIELD_COUNT
from parsers import parse_combined_line
from parsers.combined import FieldConversionError, _to_int
from tests.helpers import make_line


class TestParseCombinedLine:
    def test_parses_all_fields(self, sample_line):
        rec = parse_combined_line(sample_line)
        assert rec is not None
        assert rec.host == "127.0.0.1"
        assert rec.client_identity == "-"
        assert rec.user_id == "frank"
        assert rec.date_time == "10/Oct/2000:13:55:36 -0700"
        assert rec.http_method == "GET"
        assert rec.requested_url == "/apache_pb.gif"
        assert rec.http_protocol_version == "HTTP/1.0"
        assert rec.http_status_code == 200
        assert rec.response_body_size == 2326
        assert rec.referrer_url == "http://www.example.com/start.html"
        assert rec.agent == "Mozilla/4.08"
        assert rec.code == 15

    def test_field_lengths_in_grammar_order(self, sample_line):
        rec = parse_combined_line(sample_line)
        assert rec.field_lengths == [9, 1, 5, 26, 3, 14, 8, 3, 4, 33, 12, 2]
        assert len(rec.field_lengths) == FIELD_COUNT

    def test_agent_may_contain_spaces(self):
        agent = "Mozilla/5.0 (X11; Linux x86_64) Gecko/20100101"
        rec = parse_combined_line(make_line(agent=agent))
        assert rec.agent == agent
        assert rec.field_lengths[10] == len(agent)

    def test_trailing_newline_is_ignored(self, sample_line):
        rec = parse_combined_line(sample_line + "\r\n")
        assert rec is not None
        assert rec.code == 15

    def test_trailing_text_after_code_is_ignored(self, sample_line):
        rec = parse_combined_line(sample_line + " extra")
        assert rec is not None
        assert rec.code == 15

    def test_negative_timezone_offset_and_positive(self):
        rec = parse_combined_line(make_line().replace("-0700", "+0530"))
        assert rec.date_time.endswith("+0530")

    @pytest.mark.parametrize("line", [
        "",
        "not a valid log line",
        '127.0.0.1 - frank [10/Oct/2000:13:55:36 -0700] "GET /apache_pb.gif HTTP/1.0" 200 2326',
        make_line(status="20"),
        make_line(code="abc"),
        " " + make_line(),
    ])
    def test_no_match_returns_none(self, line):
        assert parse_combined_line(line) is None

    @pytest.mark.parametrize("size", ["-", "12kb", "1_000"])
    def test_non_integer_size_is_a_soft_failure(self, size):
        assert parse_combined_line(make_line(size=size)) is None

    def test_signed_size_is_accepted(self):
        assert parse_combined_line(make_line(size="+12")).response_body_size == 12


class TestToInt:
    def test_plain_digits(self):
        assert _to_int("code", "0042") == 42

    def test_raises_conversion_error(self):
        with pytest.raises(FieldConversionError) as exc:
            _to_int("response_body_size", "-")
        assert exc.value.field == "response_body_size"
        assert exc.value.value == "-"
        assert isinstance(exc.value, ValueError)
