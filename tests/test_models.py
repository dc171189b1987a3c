from __future__ import annotations

from datetime import date

import pytest

from datebook.domain import Event, format_date, parse_date


class TestDateFormatting:
    def test_format_date_has_no_zero_padding(self):
        assert format_date(date(2024, 1, 2)) == "1/2/2024"
        assert format_date(date(2023, 12, 25)) == "12/25/2023"

    def test_parse_date_inverts_format(self):
        assert parse_date("12/25/2023") == date(2023, 12, 25)

    def test_parse_date_rejects_other_formats(self):
        with pytest.raises(ValueError):
            parse_date("2024-01-01")


class TestEventRecords:
    def test_new_events_get_distinct_ids(self):
        first = Event.new(date="1/1/2024", name="A", start_time="09:00", end_time="10:00")
        second = Event.new(date="1/1/2024", name="A", start_time="09:00", end_time="10:00")
        assert first.id != second.id
        assert first != second

    def test_to_record_uses_stored_key_names(self):
        event = Event(id="abc", date="1/1/2024", name="Standup", start_time="09:00", end_time="09:15", desc="daily")
        assert event.to_record() == {
            "id": "abc",
            "date": "1/1/2024",
            "name": "Standup",
            "startTime": "09:00",
            "endTime": "09:15",
            "desc": "daily",
        }

    def test_from_record_round_trips(self):
        event = Event.new(date="1/1/2024", name="Standup", start_time="09:00", end_time="09:15")
        assert Event.from_record(event.to_record()) == event

    def test_from_record_assigns_id_to_legacy_records(self):
        record = {"date": "1/1/2024", "name": "Standup", "startTime": "09:00", "endTime": "09:15"}
        event = Event.from_record(record)
        assert event.id
        assert event.desc == ""

    def test_from_record_requires_fields(self):
        with pytest.raises(KeyError):
            Event.from_record({"date": "1/1/2024", "name": "Standup"})

    def test_from_record_rejects_non_text_description(self):
        record = {"date": "1/1/2024", "name": "Standup", "startTime": "09:00", "endTime": "09:15", "desc": 5}
        with pytest.raises(ValueError, match="desc"):
            Event.from_record(record)

    def test_from_record_treats_null_description_as_blank(self):
        record = {"date": "1/1/2024", "name": "Standup", "startTime": "09:00", "endTime": "09:15", "desc": None}
        assert Event.from_record(record).desc == ""

    def test_from_record_rejects_non_objects(self):
        with pytest.raises(ValueError):
            Event.from_record(["1/1/2024", "Standup"])


class TestEventChanges:
    def test_with_changes_keeps_id_and_date(self, standup):
        changed = standup.with_changes({"name": "Sync", "end_time": "09:30"})
        assert changed.id == standup.id
        assert changed.date == standup.date
        assert (changed.name, changed.end_time) == ("Sync", "09:30")

    def test_with_changes_refuses_date(self, standup):
        with pytest.raises(ValueError, match="date"):
            standup.with_changes({"date": "1/5/2024"})

    @pytest.mark.parametrize("query", ["stand", "STANDUP", "1/1/2024", "09:15"])
    def test_matches_name_date_and_times(self, standup, query):
        assert standup.matches(query)

    def test_matches_ignores_description(self):
        event = Event.new(date="1/1/2024", name="Standup", start_time="09:00", end_time="09:15", desc="coffee")
        assert not event.matches("coffee")
