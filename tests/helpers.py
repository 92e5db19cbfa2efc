"""Builders for timeline objects and journeys used across the tests."""
from datetime import datetime, timezone

from phev_analyzer.models.entries import Journey


def make_activity(start, end, distance=None, waypoint_distance=None, raw_distance=None,
                  travel_mode='DRIVE', activity_type='IN_PASSENGER_VEHICLE'):
    """Build an activitySegment timeline object."""
    activity = {
        'duration': {'startTimestamp': start, 'endTimestamp': end},
        'activityType': activity_type,
    }
    if distance is not None:
        activity['distance'] = distance
    if waypoint_distance is not None or travel_mode is not None:
        activity['waypointPath'] = {'travelMode': travel_mode}
        if waypoint_distance is not None:
            activity['waypointPath']['distanceMeters'] = waypoint_distance
    if raw_distance is not None:
        activity['simplifiedRawPath'] = {'distanceMeters': raw_distance}
    return {'activitySegment': activity}


def make_place(address, name=None, start=None, end=None):
    """Build a placeVisit timeline object."""
    location = {'address': address}
    if name is not None:
        location['name'] = name
    place_visit = {'location': location}
    if start is not None:
        place_visit['duration'] = {'startTimestamp': start, 'endTimestamp': end or start}
    return {'placeVisit': place_visit}


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def make_journey(distance_km, start, end, origin=None, destination=None):
    return Journey(
        distance_km=distance_km,
        start_timestamp=start,
        end_timestamp=end,
        origin=origin,
        destination=destination,
    )
