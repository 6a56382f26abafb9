"""
Tests for DataSource loading and Sample construction from named columns.
"""

import numpy as np
import pandas as pd
import pytest

from regsim.core.datasource import DataSource
from regsim.core.exceptions import DimensionError, ValidationError
from regsim.regression import Sample, fit


NEWSPAPERS = pd.DataFrame({
    "Newspaper": ["Baltimore Sun", "Boston Globe", "Chicago Tribune",
                  "Denver Post", "Miami Herald", "Newsday"],
    "Daily": [391.952, 516.981, 733.775, 252.624, 444.581, 825.512],
    "Sunday": [488.506, 798.298, 1133.249, 417.779, 553.479, 960.308],
})


class TestFromFile:

    def test_csv_round_trip(self, tmp_path):
        path = tmp_path / "newspapers.csv"
        NEWSPAPERS.to_csv(path, index=False)

        ds = DataSource.from_file(path)
        assert ds.n_observations == 6
        assert ds.keys() == frozenset({"Daily", "Sunday"})
        assert ds.metadata["dropped_columns"] == ["Newspaper"]
        assert ds.metadata["source_path"] == str(path)
        np.testing.assert_allclose(ds["Daily"], NEWSPAPERS["Daily"])

    def test_tsv(self, tmp_path):
        path = tmp_path / "newspapers.tsv"
        NEWSPAPERS.to_csv(path, sep="\t", index=False)
        ds = DataSource.build(path)
        assert "Sunday" in ds

    def test_unknown_suffix(self, tmp_path):
        with pytest.raises(ValidationError, match="Unknown file format"):
            DataSource.from_file(tmp_path / "data.xlsx")


class TestFromArrays:

    def test_named_columns(self):
        ds = DataSource.from_arrays(Daily=[1, 2, 3], Sunday=[2, 4, 6])
        assert ds.n_observations == 3
        assert ds["Daily"].dtype == np.float64

    def test_inconsistent_lengths(self):
        with pytest.raises(DimensionError):
            DataSource.from_arrays(Daily=[1, 2, 3], Sunday=[2, 4])

    def test_missing_key_lists_available(self):
        ds = DataSource.from_arrays(Daily=[1, 2, 3])
        with pytest.raises(KeyError, match="Available"):
            ds["Weekly"]


class TestSampleFromDataSource:

    def test_daily_predicts_sunday(self):
        ds = DataSource.from_dataframe(NEWSPAPERS)
        sample = Sample.from_datasource(ds, x="Daily", y="Sunday")
        assert sample.n == 6
        assert sample.source is ds

        model = fit(sample)
        # Sunday circulation grows with daily circulation
        assert model.slope_estimate > 0
