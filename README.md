# airwatch

Tools for working with a network of air-quality sensors. Each sensor has a
position, a trust flag, a private flag and a list of timestamped
measurements of pollutants such as O3, SO2, NO2 and PM10.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from airwatch.models import Attribute, Measurement, Sensor
from airwatch.application import Application

o3 = Attribute("O3", "µg/m3", "ozone")
first = Sensor(1, 45.0, 4.0, True, False,
               [Measurement(1000, 50.0, o3), Measurement(2000, 60.0, o3)])
second = Sensor(2, 45.1, 4.1, True, False, [Measurement(1500, 55.0, o3)])

app = Application([first, second])

# Per-gas values for measurements strictly between start and end.
averages = app.average_air_quality(45.0, 4.0, 0, 3000, 10)
print(averages)  # keys: "O3", "SO2", "NO2", "PM10"

# Other sensors ranked by root mean square distance to this one.
for other, distance in app.similar_sensors(first):
    print(other.sensor_id, distance)
```

### `airwatch.application`

- `Application(sensors)` holds a list of `Sensor` objects.
- `Application.average_air_quality(latitude, longitude, start, end, perimeter)`
  returns a dict with one entry for each of `O3`, `SO2`, `NO2` and `PM10`,
  built from the measurements whose timestamp lies strictly between `start`
  and `end`. When `end` is `None` or `0`, it is taken as one day after
  `start`. A gas with no measurement in the window gets `0.0`. The position
  and perimeter arguments are accepted but do not restrict which sensors are
  used: every sensor counts.
- `Application.similar_sensors(sensor)` compares the given sensor with every
  other sensor in the application, using only measurements taken after the
  week before the given sensor's latest measurement. For each measurement of
  the given sensor, the first measurement of the other sensor with the same
  attribute is paired with it. Sensors with no pair are left out; the rest
  are returned as `(sensor, distance)` tuples sorted by increasing distance.

### `airwatch.models`

- `Attribute(attribute_id, unit, description)` – a measured quantity.
- `Measurement(timestamp, value, attribute)` – one reading.
- `Sensor(sensor_id, latitude, longitude, trusted, private, measurements)`;
  `Sensor.is_trusted()` currently returns `True` for every sensor.
- `Cleaner(cleaner_id, latitude, longitude, start, stop)` and
  `Provider(provider_id)` – air cleaners and the companies providing them.
- `Person(id, name, sensors=...)` and its kinds `Manager`, `Government`,
  `Admin` and `User`. `User` carries `points`, and
  `User.describe_points()` returns a sentence such as
  `"L'utilisateur a 12 points."`.

## Commands

### `airwatch`

```
airwatch
```

Asks for a role: `GOUVERNEMENT`, `UTILISATEUR` or `ADMIN` (case does not
matter). An unknown role prints a message and ends the program. Otherwise
the role's numbered menu is shown repeatedly; each choice prints a short
line naming the chosen entry, an out-of-range or non-numeric choice prints
`Choix invalide.`, and the last entry (`Quitter`) ends the program. End of
input also ends it.

### `airwatch-average`

```
airwatch-average
```

Asks in turn for a latitude, a longitude, a perimeter, a start timestamp and
an end timestamp (`0` for one day after the start), then prints one line per
gas in alphabetical order, such as `Gaz : NO2, valeur : 0`. An entry that
cannot be read as a number prints `Entrée invalide : ...` and exits with
status 1. When `average_main` is called from Python with a list of
arguments, the values may be given there in the order latitude, longitude,
perimeter, start, end; any that are missing are asked for.

## What the package does not do

- It does not read sensor, measurement, cleaner or provider data from files
  or any other storage. `airwatch-average` works on an application with no
  sensors, so every gas it reports is `0`.
- The menu entries of `airwatch` only print the name of the chosen action;
  they do not compute averages, estimates, classifications, analyses,
  timings or maintenance.
- There is no authentication, no estimate of air quality at a single point
  and no analysis of private sensors.