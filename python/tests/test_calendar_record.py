import unittest
from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

from gcalendar import CalendarRecord, decompose, is_leap_year, mktime, year_length

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class LeapYearTest(unittest.TestCase):
    def test_year_length(self) -> None:
        self.assertEqual(year_length(1900), 365)
        self.assertEqual(year_length(2000), 366)
        self.assertEqual(year_length(1983), 365)
        self.assertEqual(year_length(1984), 366)

    def test_century_rule(self) -> None:
        self.assertFalse(is_leap_year(2100))
        self.assertTrue(is_leap_year(2400))
        self.assertTrue(is_leap_year(2024))
        self.assertFalse(is_leap_year(2023))


class CalendarRecordTest(unittest.TestCase):
    def test_explicit_fields(self) -> None:
        record = CalendarRecord(21, 0, 12, 23, 9, 1983, 5, 265)
        self.assertEqual(record.second, 21)
        self.assertEqual(record.minute, 0)
        self.assertEqual(record.hour, 12)
        self.assertEqual(record.day_of_month, 23)
        self.assertEqual(record.month, 9)
        self.assertEqual(record.year, 1983)
        self.assertEqual(record.day_of_week, 5)
        self.assertEqual(record.day_of_year, 265)

    def test_reference_vector(self) -> None:
        self.assertEqual(
            decompose(433166421023),
            CalendarRecord(
                second=21,
                minute=0,
                hour=12,
                day_of_month=23,
                month=9,
                year=1983,
                day_of_week=5,
                day_of_year=265,
            ),
        )

    def test_epoch_is_thursday_january_first(self) -> None:
        self.assertEqual(decompose(0), CalendarRecord.at_epoch())
        self.assertEqual(CalendarRecord.at_epoch().day_of_week, 4)

    def test_records_are_immutable(self) -> None:
        record = decompose(0)
        with self.assertRaises(FrozenInstanceError):
            record.year = 2000  # type: ignore[misc]

    def test_leap_day_and_last_day_of_leap_year(self) -> None:
        leap_day = decompose(951_782_400_000)
        self.assertEqual((leap_day.year, leap_day.month, leap_day.day_of_month), (2000, 2, 29))
        self.assertEqual(leap_day.day_of_year, 59)
        self.assertEqual(leap_day.day_of_week, 2)

        new_years_eve = decompose(978_220_800_000)
        self.assertEqual((new_years_eve.month, new_years_eve.day_of_month), (12, 31))
        self.assertEqual(new_years_eve.day_of_year, 365)

    def test_sub_second_component_is_truncated(self) -> None:
        self.assertEqual(decompose(999).second, 0)
        self.assertEqual(decompose(59_999).second, 59)

    def test_negative_input_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            decompose(-1)

    def test_matches_standard_library(self) -> None:
        for millis in range(0, 4_102_444_800_000, 29_876_543_211):
            record = decompose(millis)
            expected = _EPOCH + timedelta(milliseconds=millis)
            self.assertEqual(record.year, expected.year)
            self.assertEqual(record.month, expected.month)
            self.assertEqual(record.day_of_month, expected.day)
            self.assertEqual(record.hour, expected.hour)
            self.assertEqual(record.minute, expected.minute)
            self.assertEqual(record.second, expected.second)
            self.assertEqual(record.day_of_week, (expected.weekday() + 1) % 7)
            self.assertEqual(record.day_of_year, expected.timetuple().tm_yday - 1)

    def test_same_day_instants_share_day_of_year(self) -> None:
        start_of_day = 14_245 * 86_400_000
        first = decompose(start_of_day + 1)
        last = decompose(start_of_day + 86_399_999)
        self.assertEqual(first.day_of_year, last.day_of_year)
        self.assertEqual(decompose(start_of_day + 86_400_000).day_of_year, first.day_of_year + 1)


class RoundTripTest(unittest.TestCase):
    def test_mktime_inverts_decompose(self) -> None:
        for millis in range(0, 4_000_000_000_000, 37_123_456_789):
            self.assertEqual(mktime(decompose(millis)) * 1000, millis - millis % 1000)

    def test_mktime_reference_values(self) -> None:
        self.assertEqual(mktime(decompose(1234567890543)), 1234567890)
        self.assertEqual(mktime(CalendarRecord.at_epoch()), 0)


if __name__ == "__main__":  # pragma: no cover - convenience
    unittest.main()
