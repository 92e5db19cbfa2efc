"""
Timestamp helpers for location history records
"""
from datetime import datetime
from typing import Any, Dict, Optional

import pandas as pd


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO 8601 string (naive values are taken as UTC) to an aware UTC datetime"""
    timestamp = pd.Timestamp(value)
    if timestamp.tzinfo is None:
        timestamp = timestamp.tz_localize('UTC')
    return timestamp.tz_convert('UTC').to_pydatetime()


def get_duration_timestamp(duration: Dict[str, Any], edge: str) -> Optional[datetime]:
    """
    Read the start or end of a timeline 'duration' block.

    Newer exports carry ISO strings ('startTimestamp'), older ones epoch
    milliseconds ('startTimestampMs').
    """
    if not duration:
        return None
    iso_value = duration.get(f'{edge}Timestamp')
    if iso_value is not None:
        return parse_timestamp(iso_value)
    ms_value = duration.get(f'{edge}TimestampMs')
    if ms_value is not None:
        return pd.Timestamp(int(ms_value), unit='ms', tz='UTC').to_pydatetime()
    return None


def to_local_time(timestamp: datetime, timezone: str) -> pd.Timestamp:
    """Convert an aware timestamp to the given IANA time zone"""
    return pd.Timestamp(timestamp).tz_convert(timezone)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, truncated towards zero"""
    return int((end - start).total_seconds() / 60)
