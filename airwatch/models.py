"""Domain objects: attributes, measurements, sensors and the people using them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Attribute:
    """A measured quantity, such as a gas, with its unit and description."""

    attribute_id: str = ""
    unit: str = ""
    description: str = ""


@dataclass
class Measurement:
    """A single value of an attribute taken at a given timestamp."""

    timestamp: int = 0
    value: float = 0.0
    attribute: Attribute = field(default_factory=Attribute)


@dataclass
class Sensor:
    """An air quality sensor at a fixed position, with its measurements."""

    sensor_id: int
    latitude: float
    longitude: float
    trusted: bool = True
    private: bool = False
    measurements: list[Measurement] = field(default_factory=list)

    def is_trusted(self) -> bool:
        """Whether the sensor's data can be relied upon; every sensor is for now."""
        return True


@dataclass
class Cleaner:
    """An air cleaner running at a position between two timestamps."""

    cleaner_id: str
    latitude: float
    longitude: float
    start: int
    stop: int


@dataclass
class Provider:
    """A company that provides air cleaners."""

    provider_id: int


@dataclass
class Person:
    """Someone known to the application, owning a list of sensors."""

    id: str = ""
    name: str = ""
    sensors: list[Sensor] = field(default_factory=list, kw_only=True)


@dataclass
class Manager(Person):
    """A person with management rights."""


@dataclass
class Government(Manager):
    """A government agency."""


@dataclass
class Admin(Manager):
    """An administrator of the application."""


@dataclass
class User(Person):
    """A private individual who contributes sensor data and earns points."""

    points: int = 0

    def describe_points(self) -> str:
        """Return a sentence stating how many points the user has."""
        return f"L'utilisateur a {self.points} points."