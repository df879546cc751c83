# util/enums.py
from enum import Enum


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class GeohashChannelLevel(str, Enum):
    """Geohash precision buckets, coarsest first. Compared by precision."""

    REGION = ("region", 2, "Region")
    PROVINCE = ("province", 4, "Province")
    CITY = ("city", 5, "City")
    NEIGHBORHOOD = ("neighborhood", 6, "Neighborhood")
    BLOCK = ("block", 7, "Block")
    BUILDING = ("building", 8, "Building")

    def __new__(cls, value: str, precision: int, display_name: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.precision = precision
        obj.display_name = display_name
        return obj

    def __str__(self):
        return self.value

    @classmethod
    def _missing_(cls, value):
        # Accept member names ("CITY") and precisions (5) as well as values ("city")
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        if isinstance(value, int):
            return next((m for m in cls if m.precision == value), None)
        return None

    # str ordering would be alphabetical; order by precision instead
    def __lt__(self, other):
        if not isinstance(other, GeohashChannelLevel):
            return NotImplemented
        return self.precision < other.precision

    def __le__(self, other):
        if not isinstance(other, GeohashChannelLevel):
            return NotImplemented
        return self.precision <= other.precision

    def __gt__(self, other):
        if not isinstance(other, GeohashChannelLevel):
            return NotImplemented
        return self.precision > other.precision

    def __ge__(self, other):
        if not isinstance(other, GeohashChannelLevel):
            return NotImplemented
        return self.precision >= other.precision
