import random
import unittest
from datetime import date, datetime, timedelta

from app_utils.dates import (
    InvalidDateError,
    days_between,
    days_in_month,
    format_date,
    is_date_key,
    local_today,
    month_bounds,
    month_days,
    parse_date,
    try_parse_date,
)


class TestFormatParse(unittest.TestCase):
    def test_format_is_zero_padded(self):
        self.assertEqual(format_date(date(2025, 6, 1)), "2025-06-01")
        self.assertEqual(format_date(date(987, 1, 9)), "0987-01-09")

    def test_format_uses_local_fields_of_datetime(self):
        # late evening must stay on the same calendar day
        self.assertEqual(format_date(datetime(2025, 6, 1, 23, 59, 59)), "2025-06-01")

    def test_parse_valid(self):
        self.assertEqual(parse_date("2024-02-29"), date(2024, 2, 29))

    def test_parse_rejects_bad_shapes(self):
        for bad in ["2025-6-1", "20250101", " 2025-01-01", "2025-01-01 ", "2025/01/01", "", "abcd-ef-gh",
                    "2025-01-01\n", "\u0662\u0660\u0662\u0665-\u0660\u0661-\u0660\u0661"]:
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidDateError):
                    parse_date(bad)

    def test_parse_rejects_non_calendar_days(self):
        for bad in ["2025-02-29", "2025-02-30", "2025-13-01", "2025-00-10", "2025-04-31"]:
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidDateError):
                    parse_date(bad)

    def test_parse_rejects_non_strings(self):
        with self.assertRaises(InvalidDateError):
            parse_date(None)
        with self.assertRaises(InvalidDateError):
            parse_date(20250101)

    def test_invalid_date_is_value_error(self):
        self.assertTrue(issubclass(InvalidDateError, ValueError))

    def test_try_parse_and_is_date_key(self):
        self.assertIsNone(try_parse_date("nope"))
        self.assertEqual(try_parse_date("2025-01-31"), date(2025, 1, 31))
        self.assertTrue(is_date_key("2025-01-31"))
        self.assertFalse(is_date_key("2025-02-31"))

    def test_round_trip_random_dates(self):
        rng = random.Random(20250101)
        start = date(1900, 1, 1)
        for _ in range(1000):
            d = start + timedelta(days=rng.randrange(0, 200 * 366))
            back = parse_date(format_date(d))
            self.assertEqual((back.year, back.month, back.day), (d.year, d.month, d.day))


class TestDayArithmetic(unittest.TestCase):
    def test_days_between_whole_days(self):
        self.assertEqual(days_between(date(2025, 1, 1), date(2025, 1, 5)), 4)
        self.assertEqual(days_between(date(2024, 12, 31), date(2025, 1, 1)), 1)

    def test_days_between_floors_at_zero(self):
        self.assertEqual(days_between(date(2025, 1, 5), date(2025, 1, 1)), 0)

    def test_days_between_ignores_time_of_day(self):
        self.assertEqual(days_between(datetime(2025, 1, 1, 23, 0), datetime(2025, 1, 2, 0, 30)), 1)
        self.assertEqual(days_between(datetime(2025, 1, 1, 0, 1), datetime(2025, 1, 1, 23, 59)), 0)

    def test_month_helpers(self):
        self.assertEqual(days_in_month(2024, 2), 29)
        self.assertEqual(days_in_month(2025, 2), 28)
        self.assertEqual(month_bounds(date(2025, 1, 15)), (date(2025, 1, 1), date(2025, 1, 31)))
        days = month_days(date(2025, 4, 30))
        self.assertEqual(len(days), 30)
        self.assertEqual(days[0], date(2025, 4, 1))
        self.assertEqual(days[-1], date(2025, 4, 30))

    def test_local_today(self):
        self.assertEqual(local_today(datetime(2025, 3, 4, 23, 59)), date(2025, 3, 4))
        self.assertIsInstance(local_today(), date)


if __name__ == "__main__":
    unittest.main()
