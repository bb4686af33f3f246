"""Air quality computations over a collection of sensors."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from airwatch.models import Measurement, Sensor

GASES = ("O3", "SO2", "NO2", "PM10")
DAY = 24 * 3600
WEEK = 7 * DAY


@dataclass
class Application:
    """Holds the known sensors and answers questions about their data."""

    sensors: list[Sensor] = field(default_factory=list)

    def average_air_quality(self, latitude, longitude, start, end, perimeter) -> dict[str, float]:
        """Average value of each gas over measurements strictly between start and end.

        When end is not given (None or 0), it defaults to one day after start.
        """
        if not end:
            end = start + DAY

        totals = dict.fromkeys(GASES, 0.0)
        counts = dict.fromkeys(GASES, 0)

        for sensor in self.sensors:
            running = dict.fromkeys(GASES, 0.0)
            seen = dict.fromkeys(GASES, 0)
            for measurement in sensor.measurements:
                gas = measurement.attribute.attribute_id
                if start < measurement.timestamp < end and gas in running:
                    running[gas] += measurement.value
                    seen[gas] += 1
                    counts[gas] += 1
                for name in GASES:
                    if seen[name]:
                        running[name] /= seen[name]
                        totals[name] += running[name]

        return {
            name: totals[name] / counts[name] if counts[name] else totals[name]
            for name in GASES
        }

    def similar_sensors(self, sensor: Sensor) -> list[tuple[Sensor, float]]:
        """Other sensors ranked by root mean square distance to the given one.

        Only measurements taken within the week before the sensor's latest
        measurement are compared; sensors sharing no attribute are left out.
        """
        latest = 0
        for measurement in sensor.measurements:
            if not latest or latest < measurement.timestamp:
                latest = measurement.timestamp
        window_start = latest - WEEK

        recent = _after(sensor.measurements, window_start)

        similar: list[tuple[Sensor, float]] = []
        for other in self.sensors:
            if other == sensor:
                continue
            other_recent = _after(other.measurements, window_start)

            squared_total = 0.0
            common = 0
            for measurement in recent:
                match = next(
                    (
                        candidate
                        for candidate in other_recent
                        if candidate.attribute.attribute_id == measurement.attribute.attribute_id
                    ),
                    None,
                )
                if match is not None:
                    error = measurement.value - match.value
                    squared_total += error * error
                    common += 1

            if common:
                similar.append((other, math.sqrt(squared_total / common)))

        similar.sort(key=lambda pair: pair[1])
        return similar


def _after(measurements: list[Measurement], timestamp: int) -> list[Measurement]:
    return [m for m in measurements if m.timestamp > timestamp]