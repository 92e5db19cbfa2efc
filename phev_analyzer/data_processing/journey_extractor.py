"""
Extract vehicle journeys from a Google Semantic Location History timeline
"""
from numbers import Number
from typing import Any, Dict, List, Optional

from phev_analyzer.models.entries import Journey, Location
from phev_analyzer.utils.logger import get_logger
from phev_analyzer.utils.time_utils import get_duration_timestamp

logger = get_logger('journey_extractor')

DRIVE_TRAVEL_MODE = 'DRIVE'
PASSENGER_VEHICLE_ACTIVITY = 'IN_PASSENGER_VEHICLE'


def is_drive(activity: Dict[str, Any]) -> bool:
    """A drive is a waypoint path driven by car, or any passenger vehicle activity"""
    waypoint_path = activity.get('waypointPath')
    if waypoint_path and waypoint_path.get('travelMode') == DRIVE_TRAVEL_MODE:
        return True
    return activity.get('activityType') == PASSENGER_VEHICLE_ACTIVITY


def get_distance_meters(activity: Dict[str, Any]) -> float:
    """
    Pick the most accurate distance available for an activity segment.

    waypointPath is the snapped route, simplifiedRawPath the raw GPS trace and
    'distance' the coarse record-level estimate. The first one available wins.
    """
    waypoint_path = activity.get('waypointPath') or {}
    waypoint_distance = waypoint_path.get('distanceMeters')
    if isinstance(waypoint_distance, Number) and not isinstance(waypoint_distance, bool):
        return float(waypoint_distance)

    raw_path = activity.get('simplifiedRawPath') or {}
    if raw_path.get('distanceMeters') is not None:
        return float(raw_path['distanceMeters'])

    return float(activity.get('distance') or 0)


def _to_location(place_visit: Dict[str, Any]) -> Location:
    location = place_visit.get('location') or {}
    return Location(address=location.get('address'), name=location.get('name'))


def find_previous_place(timeline_objects: List[Dict[str, Any]], index: int) -> Optional[Location]:
    """Nearest place visit before the given index"""
    for i in range(index - 1, -1, -1):
        place_visit = timeline_objects[i].get('placeVisit')
        if place_visit:
            return _to_location(place_visit)
    return None


def find_next_place(timeline_objects: List[Dict[str, Any]], index: int) -> Optional[Location]:
    """Nearest place visit after the given index"""
    for i in range(index + 1, len(timeline_objects)):
        place_visit = timeline_objects[i].get('placeVisit')
        if place_visit:
            return _to_location(place_visit)
    return None


def extract_journeys(timeline_objects: List[Dict[str, Any]]) -> List[Journey]:
    """
    Turn timeline objects into journeys, keeping their order.

    Place visits and non-driving activities are dropped; they only serve as
    journey origins and destinations. Drives without a start or end time are
    skipped.
    """
    journeys = []
    for i, timeline_object in enumerate(timeline_objects):
        activity = timeline_object.get('activitySegment')
        if not activity or not is_drive(activity):
            continue

        duration = activity.get('duration') or {}
        start = get_duration_timestamp(duration, 'start')
        end = get_duration_timestamp(duration, 'end')
        if start is None or end is None:
            logger.warning(f"Skipping drive at timeline index {i}: no start or end timestamp")
            continue

        journeys.append(Journey(
            distance_km=get_distance_meters(activity) / 1000,
            start_timestamp=start,
            end_timestamp=end,
            origin=find_previous_place(timeline_objects, i),
            destination=find_next_place(timeline_objects, i),
        ))

    logger.debug(f"Extracted {len(journeys)} journeys from {len(timeline_objects)} timeline objects")
    return journeys
