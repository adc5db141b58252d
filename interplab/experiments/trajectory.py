"""Sampled time series produced by experiments.

A Trajectory holds one shared time axis and any number of named series,
one value per time sample. Experiments fill it; callers plot it or export
it as a pandas DataFrame.
"""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

TIME_COLUMN = "time_s"


class Trajectory:
    """Time axis plus named value series of equal length.

    Args:
        names: Series names, in column order.

    Example:
        >>> trajectory = Trajectory(["target", "value"])
        >>> trajectory.add_sample(0.0, target=1.0, value=0.0)
        >>> trajectory.series("value")
        [0.0]
    """

    def __init__(self, names: Iterable[str]) -> None:
        self._times: list[float] = []
        self._series: dict[str, list[float]] = {name: [] for name in names}
        if TIME_COLUMN in self._series:
            raise ValueError(f"'{TIME_COLUMN}' is reserved for the time axis")

    def add_sample(self, time: float, **values: float) -> None:
        """Record one value for every series at ``time``.

        Raises:
            ValueError: If the values do not name exactly the trajectory's series.
        """
        if values.keys() != self._series.keys():
            raise ValueError(
                f"Sample must provide {sorted(self._series)}, got {sorted(values)}"
            )
        self._times.append(time)
        for name, value in values.items():
            self._series[name].append(value)

    @property
    def names(self) -> list[str]:
        return list(self._series)

    def times(self) -> list[float]:
        """Sample times in seconds."""
        return self._times

    def series(self, name: str) -> list[float]:
        """Values of one series.

        Raises:
            KeyError: If no series has that name.
        """
        return self._series[name]

    def final(self, name: str) -> float:
        """Last recorded value of a series."""
        return self._series[name][-1]

    def to_dict(self) -> dict[str, list[float]]:
        """Return dict with the time axis under 'time_s' and one key per series."""
        result = {TIME_COLUMN: list(self._times)}
        for name, values in self._series.items():
            result[name] = list(values)
        return result

    def to_dataframe(self) -> pd.DataFrame:
        """Return the samples as a DataFrame with a 'time_s' column first."""
        return pd.DataFrame(self.to_dict(), columns=[TIME_COLUMN, *self._series])

    def __len__(self) -> int:
        return len(self._times)

    def __bool__(self) -> bool:
        return len(self._times) > 0

    def __repr__(self) -> str:
        return f"Trajectory(names={self.names!r}, samples={len(self)})"
