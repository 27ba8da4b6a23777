import datetime as dt
from typing import Iterable, Sequence

from pydantic import ValidationError

from ..models.data_point import DATE_FORMAT, DataPoint
from ..models.dataset import Dataset
from ..models.errors import ParseError
from ..utils.logger import log

logger = log


def parse_date(text: str) -> dt.date:
    try:
        return dt.datetime.strptime(text, DATE_FORMAT).date()
    except (TypeError, ValueError) as e:
        raise ParseError(f"Invalid date {text!r}, expected YYYY-MM-DD") from e


def transform(raw_pairs: Iterable[Sequence]) -> Dataset:
    """
    Turn raw (date string, value) pairs into a Dataset.

    Only the date format is enforced. Unsorted dates and negative values are
    kept as they are, with a warning, since the feed is trusted to be
    chronological and non-negative.
    """
    points = []
    previous = None
    for pair in raw_pairs:
        if not isinstance(pair, (list, tuple)) or len(pair) < 2:
            raise ParseError(f"Expected [date, value] pair, got {pair!r}")
        date_string, value = pair[0], pair[1]

        try:
            point = DataPoint(date=parse_date(date_string), value=value)
        except ValidationError as e:
            raise ParseError(f"Invalid value {value!r} for {date_string}") from e
        if previous is not None and point.date < previous.date:
            logger.warning(f"Out of order date {point.date_string} after {previous.date_string}")
        if point.value < 0:
            logger.warning(f"Negative value {point.value} on {point.date_string}")

        points.append(point)
        previous = point

    dataset = Dataset.from_points(points)
    logger.info(
        f"Transformed {len(dataset)} points "
        f"({dataset.min_date} -> {dataset.max_date}, max value {dataset.max_value})"
    )
    return dataset
