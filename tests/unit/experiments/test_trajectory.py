"""Unit tests for Trajectory."""

import pytest

from interplab.experiments.trajectory import TIME_COLUMN, Trajectory


@pytest.fixture
def trajectory() -> Trajectory:
    trajectory = Trajectory(["target", "value"])
    trajectory.add_sample(0.0, target=1.0, value=0.0)
    trajectory.add_sample(0.5, target=1.0, value=0.4)
    trajectory.add_sample(1.0, target=1.0, value=0.7)
    return trajectory


class TestTrajectory:
    """Tests for the Trajectory container."""

    def test_empty(self):
        """A new trajectory has names but no samples."""
        trajectory = Trajectory(["a", "b"])
        assert trajectory.names == ["a", "b"]
        assert len(trajectory) == 0
        assert not trajectory

    def test_series_and_times(self, trajectory):
        """Samples are stored per series in insertion order."""
        assert trajectory.times() == [0.0, 0.5, 1.0]
        assert trajectory.series("value") == [0.0, 0.4, 0.7]
        assert trajectory.final("value") == 0.7
        assert len(trajectory) == 3

    def test_missing_series_value_rejected(self, trajectory):
        """Every series needs a value for each sample."""
        with pytest.raises(ValueError, match="Sample must provide"):
            trajectory.add_sample(1.5, target=1.0)

    def test_unknown_series_value_rejected(self, trajectory):
        """Extra keys are rejected too."""
        with pytest.raises(ValueError):
            trajectory.add_sample(1.5, target=1.0, value=0.8, other=0.0)

    def test_unknown_series_lookup(self, trajectory):
        """Looking up a missing series raises KeyError."""
        with pytest.raises(KeyError):
            trajectory.series("velocity")

    def test_reserved_time_name(self):
        """The time column name cannot be a series."""
        with pytest.raises(ValueError, match="reserved"):
            Trajectory([TIME_COLUMN])

    def test_to_dict_copies(self, trajectory):
        """to_dict returns fresh lists keyed by time and series names."""
        data = trajectory.to_dict()
        assert list(data) == [TIME_COLUMN, "target", "value"]
        data["value"].append(99.0)
        assert trajectory.series("value") == [0.0, 0.4, 0.7]

    def test_to_dataframe(self, trajectory):
        """DataFrame export keeps column order and values."""
        df = trajectory.to_dataframe()
        assert list(df.columns) == [TIME_COLUMN, "target", "value"]
        assert len(df) == 3
        assert df["value"].iloc[-1] == pytest.approx(0.7)

    def test_csv_export(self, trajectory, test_output_dir):
        """The DataFrame round-trips through CSV."""
        import pandas as pd

        path = test_output_dir / "trajectory.csv"
        trajectory.to_dataframe().to_csv(path, index=False)
        df = pd.read_csv(path)
        assert list(df[TIME_COLUMN]) == [0.0, 0.5, 1.0]

    def test_empty_dataframe_has_columns(self):
        """An empty trajectory still exports its columns."""
        df = Trajectory(["value"]).to_dataframe()
        assert list(df.columns) == [TIME_COLUMN, "value"]
        assert df.empty

    def test_repr(self, trajectory):
        """repr summarises names and sample count."""
        assert repr(trajectory) == "Trajectory(names=['target', 'value'], samples=3)"
