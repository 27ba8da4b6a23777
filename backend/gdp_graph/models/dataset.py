# models/dataset.py

import datetime as dt
from typing import Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from .data_point import DataPoint
from .errors import ParseError


class Dataset(BaseModel):
    """
    Ordered, immutable series of data points plus its extrema.

    The extrema are computed once, in a single pass, when the dataset is
    built through `from_points` and never change afterwards.
    """

    model_config = ConfigDict(frozen=True)

    points: Tuple[DataPoint, ...]
    min_date: dt.date
    max_date: dt.date
    min_value: float
    max_value: float

    @classmethod
    def from_points(cls, points: Sequence[DataPoint]) -> "Dataset":
        if not points:
            raise ParseError("Dataset must contain at least one data point")

        first = points[0]
        min_date = max_date = first.date
        min_value = max_value = first.value

        for point in points[1:]:
            if point.date < min_date:
                min_date = point.date
            if point.date > max_date:
                max_date = point.date
            if point.value < min_value:
                min_value = point.value
            if point.value > max_value:
                max_value = point.value

        return cls(
            points=tuple(points),
            min_date=min_date,
            max_date=max_date,
            min_value=min_value,
            max_value=max_value,
        )

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> DataPoint:
        return self.points[index]
