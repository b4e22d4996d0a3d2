"""Tests for the fixed-format parsers exposed by DateTimeHelper."""

from datetime import date

import pytest

from datetime_helper.utils.parsers import parse_basic_iso_date, parse_day_month_year


class TestParseDate:

    def test_valid(self, helper):
        assert helper.parse_date("20201231") == date(2020, 12, 31)

    def test_month_above_twelve(self, helper):
        assert helper.parse_date("20201301") is None

    def test_invalid_day_is_not_clamped(self, helper):
        assert helper.parse_date("20200230") is None

    def test_month_zero(self, helper):
        assert helper.parse_date("20200001") is None

    @pytest.mark.parametrize("text", ["", "2020", "20201", "2020123", "202012311", "2020-12-31", "2020ab31"])
    def test_malformed(self, helper, text):
        assert helper.parse_date(text) is None

    def test_non_string(self, helper):
        assert helper.parse_date(20201231) is None

    def test_non_ascii_digits(self):
        assert parse_basic_iso_date("2020١١2") is None


class TestCustomParseDate:

    def test_two_digit_day(self, helper):
        assert helper.custom_parse_date("06 Sep 2019") == date(2019, 9, 6)

    def test_one_digit_day(self, helper):
        assert helper.custom_parse_date("6 Sep 2019") == date(2019, 9, 6)

    def test_day_above_31(self, helper):
        assert helper.custom_parse_date("32 Jan 2020") is None

    def test_day_past_month_end_is_clamped(self, helper):
        assert helper.custom_parse_date("31 Apr 2020") == date(2020, 4, 30)
        assert helper.custom_parse_date("30 Feb 2021") == date(2021, 2, 28)

    def test_day_zero(self, helper):
        assert helper.custom_parse_date("00 Jan 2020") is None

    @pytest.mark.parametrize("text", ["06 sep 2019", "06 September 2019", "06 Sept 2019", "06 Foo 2019"])
    def test_unknown_month_text(self, helper, text):
        assert helper.custom_parse_date(text) is None

    @pytest.mark.parametrize("text", ["", "1", "06-Sep-2019", "06 Sep 19", "Sep 06 2019"])
    def test_malformed(self, helper, text):
        assert helper.custom_parse_date(text) is None

    def test_module_function_matches_helper(self, helper):
        assert parse_day_month_year("15 Mar 2021") == helper.custom_parse_date("15 Mar 2021")


class TestParserLogging:

    def test_short_input_is_logged(self, caplog):
        with caplog.at_level("DEBUG", logger="datetime_helper.utils.parsers"):
            assert parse_basic_iso_date("2020") is None
        assert "too short" in caplog.text

    def test_month_range_is_logged(self, caplog):
        with caplog.at_level("DEBUG", logger="datetime_helper.utils.parsers"):
            parse_basic_iso_date("20201301")
        assert "exceeds 12" in caplog.text
