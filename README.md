# meeus

Algorithms for astronomical computation, with no dependencies beyond the
standard library. The package covers tabular interpolation, iteration,
Julian day and calendar conversions (including the Jewish and Moslem
calendars), nutation and obliquity, the position, phases, nodes, maximum
declinations and illumination of the Moon, low-accuracy positions of the
Galilean satellites and physical ephemeris of Jupiter, bodies in a straight
line, the parallactic angle, and elliptic, parabolic and near-parabolic
orbits.

Angles are plain floats in radians unless a function says otherwise.
Times are Julian days (or Julian ephemeris days) as floats.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Julian day and calendar:

```python
from meeus import julian

jd = julian.calendar_gregorian_to_jd(1957, 10, 4.81)   # 2436116.31
year, month, day = julian.jd_to_calendar(jd)          # (1957, 10, 4.81...)
julian.day_of_week(2434923.5)                         # 3 (Wednesday; 0 is Sunday)
```

Interpolation from a three-row table:

```python
from meeus.interp import Len3

table = Len3(7, 9, [0.884226, 0.877366, 0.870531])
table.interpolate_x(8.18125)                           # 0.876125...
```

Jewish and Moslem calendars:

```python
from meeus import jm

year = jm.jewish_calendar(1990)        # JewishYear(year=5750, pesach_month=4, pesach_day=10, ...)
y, m, d = jm.julian_to_moslem(1991, 7, 31)
print(d, jm.MoslemMonth(m), y)         # 2 Ṣafar 1412
```

Phases of the Moon:

```python
from meeus import moonphase

moonphase.new(1977.13)                                 # JDE 2443192.65118...
```

Solving Kepler's equation:

```python
import math
from meeus import kepler

E = kepler.kepler2(0.1, math.radians(5), 11)           # eccentric anomaly, radians
```

## Modules

- `meeus.interp`: `Len3`, `Len5`, `len4_half`, `lagrange`, `lagrange_poly`, `horner`,
  and the exceptions `InterpolationError`, `OutOfRangeError`, `NoExtremumError`,
  `ExtremumOutsideError`, `ZeroOutsideError`, `NoConvergenceError`
- `meeus.iterate`: `decimal_places`, `full_precision`, `binary_root`, `IterationError`
- `meeus.julian`: `calendar_gregorian_to_jd`, `calendar_julian_to_jd`, `jd_to_calendar`,
  `jd_to_datetime`, `datetime_to_jd`, leap years, `day_of_week`, day of year and back,
  `j2000_century`
- `meeus.jm`: `jewish_calendar` (returning `JewishYear`), `moslem_to_julian`,
  `julian_to_moslem`, `moslem_leap_year`, `julian_to_gregorian`, `gregorian_to_julian`,
  `MoslemMonth`
- `meeus.line`: `time`, `angle`, `error`, `angle_error` for bodies in a straight line
- `meeus.nutation`: `nutation`, `approx_nutation`, `mean_obliquity`,
  `mean_obliquity_laskar`, `nutation_in_ra`
- `meeus.moonposition`: `position`, `parallax`, `node`, `perigee`, `true_node`
- `meeus.moonnode`: `ascending`, `descending`
- `meeus.moonphase`: `new`, `first`, `full`, `last` and their `mean_*` counterparts
- `meeus.moonmaxdec`: `north`, `south`
- `meeus.moonillum`: `phase_angle_eq`, `phase_angle_eq2`, `phase_angle_ecl`,
  `phase_angle_ecl2`, `phase_angle3`
- `meeus.parallactic`: `parallactic_angle`, `parallactic_angle_on_horizon`,
  `ecliptic_at_horizon`, `ecliptic_at_equator`, `diurnal_path_at_horizon`
- `meeus.jupiter`: `physical2`
- `meeus.jupitermoons`: `positions`, returning four `XY` values
- `meeus.kepler`: `true_anomaly`, `radius`, `kepler1`, `kepler2`, `kepler2a`,
  `kepler2b`, `kepler3`, `kepler4`
- `meeus.parabolic`: `Elements.anomaly_distance`
- `meeus.nearparabolic`: `Elements.anomaly_distance`, `NoConvergenceError`
- `meeus.node`: `elliptic_ascending`, `elliptic_descending`, `parabolic_ascending`,
  `parabolic_descending`

Failures to converge and out-of-range arguments are reported as exceptions,
for example `meeus.iterate.IterationError`, `meeus.interp.NoConvergenceError`
and `meeus.nearparabolic.NoConvergenceError`.

## What the package does not do

- It has no planetary theory (no VSOP87 tables). The Jupiter physical
  ephemeris and the positions of the Galilean satellites are only the
  low-accuracy methods, `jupiter.physical2` and `jupitermoons.positions`;
  there is no physical ephemeris of Mars or of the Moon.
- It does not format angles or times in sexagesimal notation; results are
  plain floats.
- It is a library only and provides no command-line program.