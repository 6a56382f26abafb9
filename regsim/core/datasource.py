"""
Universal DataSource for regsim.

DataSource is the "I have data" abstraction. It doesn't know or care
what domain consumes it. It just provides named columns.

Like a lumber yard: provides raw logs. Doesn't care if you're making
furniture, paper, or two-by-fours.

Usage:
    from regsim.core import DataSource

    ds = DataSource.from_file("newspapers.csv")
    ds = DataSource.from_dataframe(df)
    ds = DataSource.from_arrays(Daily=daily, Sunday=sunday)

    ds.keys()        # frozenset({'Daily', 'Sunday'})
    daily = ds['Daily']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from regsim.core.exceptions import ValidationError, DimensionError

if TYPE_CHECKING:
    import pandas as pd


@dataclass
class DataSource:
    """
    Universal data container. Domain-agnostic.

    Construct via factory classmethods, not directly.
    """
    _data: dict[str, NDArray[np.floating[Any]]]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Array Access ===

    def keys(self) -> frozenset[str]:
        """Return the names of all available columns."""
        return frozenset(self._data.keys())

    def __getitem__(self, key: str) -> NDArray[np.floating[Any]]:
        """
        Access a named column.

        Raises:
            KeyError: If key not found, with helpful message listing available keys

        Example:
            >>> ds = DataSource.from_arrays(Daily=d, Sunday=s)
            >>> ds['Weekly']  # KeyError: "DataSource has no column 'Weekly'. Available: ..."
        """
        if key not in self._data:
            available = sorted(self.keys())
            raise KeyError(
                f"DataSource has no column '{key}'. Available: {available}"
            )
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        return key in self._data

    # === Properties ===

    @property
    def n_observations(self) -> int:
        """Number of statistical units (rows)."""
        return self._metadata.get('n_observations', 0)

    @property
    def metadata(self) -> dict[str, Any]:
        """Domain-agnostic metadata."""
        return self._metadata.copy()

    # === Factory Methods ===

    @classmethod
    def from_arrays(cls, **named_arrays: NDArray) -> DataSource:
        """Construct from NumPy arrays, one keyword per column."""
        storage: dict[str, NDArray[np.floating[Any]]] = {}
        for name, arr in named_arrays.items():
            storage[name] = np.asarray(arr, dtype=np.float64)

        lengths = {name: arr.shape[0] for name, arr in storage.items()}
        if len(set(lengths.values())) > 1:
            details = ", ".join(f"{k}={v}" for k, v in lengths.items())
            raise DimensionError(f"Inconsistent column lengths: {details}")

        n_obs = next(iter(lengths.values()), 0)
        return cls(
            _data=storage,
            _metadata={'n_observations': n_obs, 'source': 'arrays'},
        )

    @classmethod
    def from_file(cls, path: str | Path, *, columns: list[str] | None = None) -> DataSource:
        """Construct from a delimited text file (CSV, TSV)."""
        import pandas as pd

        path = Path(path)
        suffix = path.suffix.lower()

        if suffix == '.csv':
            df = pd.read_csv(path, usecols=columns)
        elif suffix == '.tsv':
            df = pd.read_csv(path, sep='\t', usecols=columns)
        else:
            raise ValidationError(f"Unknown file format: {suffix}")
        return cls.from_dataframe(df, source_path=str(path))

    @classmethod
    def from_dataframe(cls, df: 'pd.DataFrame', *, source_path: str | None = None) -> DataSource:
        """
        Construct from pandas DataFrame.

        Only numeric columns are kept; label columns (newspaper names,
        ids) are dropped rather than coerced.
        """
        from pandas.api.types import is_bool_dtype, is_numeric_dtype

        storage: dict[str, NDArray[np.floating[Any]]] = {}
        dropped: list[str] = []

        for col in df.columns:
            series = df[col]
            if is_numeric_dtype(series) and not is_bool_dtype(series):
                storage[str(col)] = series.to_numpy(dtype=np.float64)
            else:
                dropped.append(str(col))

        metadata: dict[str, Any] = {
            'n_observations': len(df),
            'source': 'dataframe',
            'columns': list(storage.keys()),
            'dropped_columns': dropped,
        }
        if source_path:
            metadata['source_path'] = source_path

        return cls(_data=storage, _metadata=metadata)

    @classmethod
    def build(cls, *args, **kwargs) -> DataSource:
        """
        Convenience factory that dispatches to appropriate from_* method.

        Examples:
            DataSource.build(Daily=d, Sunday=s)  # from_arrays
            DataSource.build("newspapers.csv")   # from_file
        """
        if args and isinstance(args[0], (str, Path)):
            return cls.from_file(args[0], **kwargs)
        return cls.from_arrays(**kwargs)
