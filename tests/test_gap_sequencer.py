"""Tests for inferring parking stops between journeys."""
from phev_analyzer.data_processing.gap_sequencer import build_journey_entries
from phev_analyzer.models.entries import JourneyEntry, Location, ParkingConfidence, ParkingEntry
from tests.helpers import make_journey, utc


class TestBuildJourneyEntries:
    """Journey and parking interleaving."""

    def test_parking_between_journeys(self, home, mall):
        first = make_journey(10, utc(2023, 3, 1, 8, 0), utc(2023, 3, 1, 8, 30), home, mall)
        second = make_journey(10, utc(2023, 3, 1, 10, 0), utc(2023, 3, 1, 10, 30), mall, home)

        entries = build_journey_entries([first, second])

        assert [type(e) for e in entries] == [JourneyEntry, ParkingEntry, JourneyEntry]
        parking = entries[1].parking
        assert parking.location == mall
        assert parking.duration_minutes == 90
        assert parking.confidence is ParkingConfidence.HIGH

    def test_last_journey_has_no_parking(self, home, mall):
        journey = make_journey(10, utc(2023, 3, 1, 8, 0), utc(2023, 3, 1, 8, 30), home, mall)
        assert build_journey_entries([journey]) == [JourneyEntry(journey=journey)]

    def test_journey_without_destination_has_no_parking(self, home, mall):
        first = make_journey(10, utc(2023, 3, 1, 8, 0), utc(2023, 3, 1, 8, 30), home, None)
        second = make_journey(10, utc(2023, 3, 1, 10, 0), utc(2023, 3, 1, 10, 30), mall, home)

        entries = build_journey_entries([first, second])

        assert entries == [JourneyEntry(journey=first), JourneyEntry(journey=second)]

    def test_negative_gap_is_clamped(self, home, mall):
        first = make_journey(10, utc(2023, 3, 1, 8, 0), utc(2023, 3, 1, 8, 30), home, mall)
        second = make_journey(10, utc(2023, 3, 1, 8, 20), utc(2023, 3, 1, 9, 0), mall, home)

        parking = build_journey_entries([first, second])[1].parking

        assert parking.duration_minutes == 0

    def test_partial_minutes_are_truncated(self, home, mall):
        first = make_journey(10, utc(2023, 3, 1, 8, 0), utc(2023, 3, 1, 8, 30, 0), home, mall)
        second = make_journey(10, utc(2023, 3, 1, 9, 15, 59), utc(2023, 3, 1, 10, 0), mall, home)

        assert build_journey_entries([first, second])[1].parking.duration_minutes == 45

    def test_different_origin_is_low_confidence(self, home, mall):
        first = make_journey(10, utc(2023, 3, 1, 8, 0), utc(2023, 3, 1, 8, 30), home, mall)
        elsewhere = Location(address='Tapiontori 3, 02100 Espoo', name='Iso Omena')
        second = make_journey(10, utc(2023, 3, 1, 10, 0), utc(2023, 3, 1, 10, 30), elsewhere, home)

        parking = build_journey_entries([first, second])[1].parking

        assert parking.confidence is ParkingConfidence.LOW

    def test_unknown_origin_is_low_confidence(self, home, mall):
        first = make_journey(10, utc(2023, 3, 1, 8, 0), utc(2023, 3, 1, 8, 30), home, mall)
        second = make_journey(10, utc(2023, 3, 1, 10, 0), utc(2023, 3, 1, 10, 30), None, home)

        parking = build_journey_entries([first, second])[1].parking

        assert parking.confidence is ParkingConfidence.LOW
        assert parking.location == mall

    def test_order_is_preserved(self, home, mall):
        journeys = [
            make_journey(1, utc(2023, 3, 1, 12, 0), utc(2023, 3, 1, 12, 30), home, mall),
            make_journey(2, utc(2023, 3, 1, 8, 0), utc(2023, 3, 1, 8, 30), mall, home),
            make_journey(3, utc(2023, 3, 1, 18, 0), utc(2023, 3, 1, 18, 30), home, None),
        ]

        entries = build_journey_entries(journeys)
        distances = [e.journey.distance_km for e in entries if isinstance(e, JourneyEntry)]

        assert distances == [1, 2, 3]
        assert entries[1].parking.duration_minutes == 0

    def test_empty(self):
        assert build_journey_entries([]) == []
