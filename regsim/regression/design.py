"""
Regression Sample.

A Sample is the design for simple linear regression: one predictor x and
one response y, paired by position. It wraps raw arrays or a DataSource
and knows it's building a line fit. DataSource doesn't.

Like a furniture maker visiting the lumber yard: "I need these two logs
for making a chair." The lumber yard just provides logs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from regsim.core.datasource import DataSource
from regsim.core.defaults import MIN_SAMPLE_SIZE
from regsim.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_consistent_length,
    check_min_samples,
)


@dataclass(frozen=True)
class Sample:
    """
    Ordered (predictor, response) pairs.

    Immutable after construction: the arrays are private read-only copies.

    Construction:
        Sample.from_arrays(x, y)
        Sample.from_datasource(ds, x='Daily', y='Sunday')
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _source: DataSource | None = None

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> Sample:
        """Build a Sample directly from predictor and response arrays."""
        return cls._build(check_array(x, 'x'), check_array(y, 'y'), source=None)

    @classmethod
    def from_datasource(
        cls,
        source: DataSource,
        *,
        x: str,
        y: str,
    ) -> Sample:
        """
        Build a Sample from two DataSource columns.

        Args:
            source: The DataSource
            x: Predictor column, e.g. 'Daily'
            y: Response column, e.g. 'Sunday'
        """
        return cls._build(
            check_array(source[x], x),
            check_array(source[y], y),
            source=source,
        )

    @classmethod
    def _build(cls, x: NDArray, y: NDArray, source: DataSource | None) -> Sample:
        """Internal builder with validation."""
        check_1d(x, 'x')
        check_1d(y, 'y')
        check_finite(x, 'x')
        check_finite(y, 'y')
        check_consistent_length(x, y, names=('x', 'y'))
        check_min_samples(x, MIN_SAMPLE_SIZE, 'x')

        x = np.array(x, dtype=np.float64)
        y = np.array(y, dtype=np.float64)
        x.setflags(write=False)
        y.setflags(write=False)

        return cls(_x=x, _y=y, _n=x.shape[0], _source=source)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor values (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response values (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def source(self) -> DataSource | None:
        """Original DataSource, if available."""
        return self._source

    @property
    def x_mean(self) -> float:
        return float(np.mean(self._x))

    @property
    def sxx(self) -> float:
        """Centered sum of squares of the predictor, sum((x - mean(x))^2)."""
        dx = self._x - self.x_mean
        return float(dx @ dx)

    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix [1, x] (n x 2)."""
        return np.column_stack([np.ones(self._n), self._x])

    def take(self, indices: NDArray[np.integer[Any]]) -> Sample:
        """Rows at the given positions, in the given order (repeats allowed)."""
        return Sample._build(self._x[indices], self._y[indices], source=None)

    def __len__(self) -> int:
        return self._n
