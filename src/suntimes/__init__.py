from .almanac import (
    ASTRONOMICAL_ZENITH,
    CIVIL_ZENITH,
    NAUTICAL_ZENITH,
    OFFICIAL_ZENITH,
    Coordinate,
    NoSunEventError,
    SunEventFailure,
    SunEventRequest,
    SunNeverRisesError,
    SunNeverSetsError,
    compute_event,
    dawn,
    day_of_year,
    days_in_month,
    dusk,
    force_range,
    hours_to_utc,
    sun_times,
    sunrise,
    sunset,
)

__all__ = [
    "ASTRONOMICAL_ZENITH",
    "CIVIL_ZENITH",
    "NAUTICAL_ZENITH",
    "OFFICIAL_ZENITH",
    "Coordinate",
    "NoSunEventError",
    "SunEventFailure",
    "SunEventRequest",
    "SunNeverRisesError",
    "SunNeverSetsError",
    "compute_event",
    "dawn",
    "day_of_year",
    "days_in_month",
    "dusk",
    "force_range",
    "hours_to_utc",
    "sun_times",
    "sunrise",
    "sunset",
]
