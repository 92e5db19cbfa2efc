"""
Journey, parking and simulated consumption entries
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar, List, Optional, Union


@dataclass(frozen=True)
class Location:
    address: Optional[str]
    name: Optional[str] = None


@dataclass(frozen=True)
class Journey:
    """A single drive inferred from the location history"""
    distance_km: float
    start_timestamp: datetime
    end_timestamp: datetime
    origin: Optional[Location]
    destination: Optional[Location]


class ParkingConfidence(Enum):
    HIGH = "high"
    LOW = "low"


@dataclass(frozen=True)
class Parking:
    """A stop between two journeys, located at the destination of the first one"""
    location: Location
    duration_minutes: int
    confidence: ParkingConfidence


@dataclass(frozen=True)
class ConsumptionJourney(Journey):
    """
    Journey with its split between electric and secondary fuel.

    distance_km is the distance-corrected distance that was simulated;
    recorded_distance_km is the distance from the location history.
    secondary_consumption is litres of petrol, or kWh for a pure electric car.
    """
    recorded_distance_km: float
    average_speed_kmh: float
    consumption_kwh_per_100km: float
    electric_distance_km: float
    electric_consumption_kwh: float
    secondary_distance_km: float
    secondary_consumption: float
    battery_left_kwh_before: float
    battery_left_kwh_after: float


@dataclass(frozen=True)
class ChargingEntry(Parking):
    """Parking with the energy charged during it"""
    charging_power_kw: float
    charging_duration_minutes: int
    charged_kwh: float
    battery_left_kwh_before: float
    battery_left_kwh_after: float


@dataclass(frozen=True)
class JourneyEntry:
    entry_type: ClassVar[str] = 'journey'
    journey: Journey


@dataclass(frozen=True)
class ParkingEntry:
    entry_type: ClassVar[str] = 'parking'
    parking: Parking


@dataclass(frozen=True)
class ConsumptionJourneyEntry:
    entry_type: ClassVar[str] = 'journey'
    journey: ConsumptionJourney


@dataclass(frozen=True)
class ChargingParkingEntry:
    entry_type: ClassVar[str] = 'parking'
    parking: ChargingEntry


TimelineEntry = Union[JourneyEntry, ParkingEntry]
ConsumptionEntry = Union[ConsumptionJourneyEntry, ChargingParkingEntry]


def get_battery_left_after(entry: ConsumptionEntry) -> float:
    """Battery level (kWh) at the end of a simulated entry"""
    if isinstance(entry, ConsumptionJourneyEntry):
        return entry.journey.battery_left_kwh_after
    if isinstance(entry, ChargingParkingEntry):
        return entry.parking.battery_left_kwh_after
    raise TypeError(f"Unknown consumption entry: {type(entry).__name__}")


@dataclass(frozen=True)
class PowerSourceResult:
    entries: List[ConsumptionEntry]

    @property
    def journeys(self) -> List[ConsumptionJourney]:
        return [entry.journey for entry in self.entries if isinstance(entry, ConsumptionJourneyEntry)]

    @property
    def charging_stops(self) -> List[ChargingEntry]:
        return [entry.parking for entry in self.entries if isinstance(entry, ChargingParkingEntry)]

    @property
    def final_battery_kwh(self) -> Optional[float]:
        if not self.entries:
            return None
        return get_battery_left_after(self.entries[-1])
