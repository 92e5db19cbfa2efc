"""
Infer parking stops between consecutive journeys
"""
from typing import List

from phev_analyzer.models.entries import (
    Journey, JourneyEntry, Parking, ParkingConfidence, ParkingEntry, TimelineEntry
)
from phev_analyzer.utils.logger import get_logger
from phev_analyzer.utils.time_utils import minutes_between

logger = get_logger('gap_sequencer')


def get_parking_confidence(journey: Journey, next_journey: Journey) -> ParkingConfidence:
    """High when the next journey starts where this one ended"""
    if next_journey.origin is None or journey.destination is None:
        return ParkingConfidence.LOW
    if next_journey.origin.address != journey.destination.address:
        return ParkingConfidence.LOW
    return ParkingConfidence.HIGH


def build_journey_entries(journeys: List[Journey]) -> List[TimelineEntry]:
    """
    Interleave journeys with the parking stops between them.

    A journey without a known destination, and the last journey, are not
    followed by a parking entry. Input order is kept as is.
    """
    entries: List[TimelineEntry] = []
    low_confidence = 0

    for i, journey in enumerate(journeys):
        entries.append(JourneyEntry(journey=journey))

        if i == len(journeys) - 1 or journey.destination is None:
            continue

        next_journey = journeys[i + 1]
        # Clock skew between records can make the gap negative
        duration_minutes = max(0, minutes_between(journey.end_timestamp, next_journey.start_timestamp))
        confidence = get_parking_confidence(journey, next_journey)
        if confidence is ParkingConfidence.LOW:
            low_confidence += 1

        entries.append(ParkingEntry(parking=Parking(
            location=journey.destination,
            duration_minutes=duration_minutes,
            confidence=confidence,
        )))

    logger.debug(f"Built {len(entries)} entries, {low_confidence} low confidence parking stops")
    return entries
