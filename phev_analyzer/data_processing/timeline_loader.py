"""
Load Google Semantic Location History exports
"""
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from config.logging_config import is_detailed_logging_enabled
from phev_analyzer.utils.logger import get_logger, log_detailed
from phev_analyzer.utils.time_utils import get_duration_timestamp

logger = get_logger('timeline_loader')

_NO_TIMESTAMP = datetime.max.replace(tzinfo=timezone.utc)


class InvalidTimelineFileError(ValueError):
    """Raised when a file is not a Semantic Location History export"""


def load_timeline_file(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Read the timeline objects of one monthly export file"""
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict) or 'timelineObjects' not in data:
        raise InvalidTimelineFileError(
            f"{path.name} is not a Google Semantic Location History file (no 'timelineObjects')"
        )

    timeline_objects = data['timelineObjects']
    if is_detailed_logging_enabled('timeline_loading'):
        log_detailed(f"{path}: {len(timeline_objects)} timeline objects", "timeline_loading")
    return timeline_objects


def get_start_timestamp(timeline_object: Dict[str, Any]) -> datetime:
    """Start of an activity, or of a place visit when there is no activity"""
    activity = timeline_object.get('activitySegment')
    if activity:
        start = get_duration_timestamp(activity.get('duration'), 'start')
        if start is not None:
            return start
    place_visit = timeline_object.get('placeVisit')
    if place_visit:
        start = get_duration_timestamp(place_visit.get('duration'), 'start')
        if start is not None:
            return start
    return _NO_TIMESTAMP


def sort_timeline_objects(timeline_objects: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Order timeline objects by start time; objects without one go last"""
    return sorted(timeline_objects, key=get_start_timestamp)


def load_timeline_files(paths: Iterable[Union[str, Path]]) -> List[Dict[str, Any]]:
    """Read several exports into one chronologically sorted timeline"""
    timeline_objects = []
    file_count = 0
    for path in paths:
        timeline_objects.extend(load_timeline_file(path))
        file_count += 1

    logger.info(f"Loaded {len(timeline_objects)} timeline objects from {file_count} files")
    return sort_timeline_objects(timeline_objects)
