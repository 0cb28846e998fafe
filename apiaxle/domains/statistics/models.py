from datetime import datetime
from enum import Enum
from typing import Dict


class HitType(str, Enum):
    """Category a counted request falls into"""
    CACHED = "cached"
    UNCACHED = "uncached"
    ERROR = "error"


class Granularity(str, Enum):
    """Size of the time buckets statistics are aggregated into"""
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"

    def __str__(self) -> str:
        return self.value


# hit type -> bucket start -> status code -> count
StatsTable = Dict[HitType, Dict[datetime, Dict[int, int]]]
