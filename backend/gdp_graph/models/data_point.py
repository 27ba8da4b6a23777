# models/data_point.py

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from ..charting.formatting import get_quarter

DATE_FORMAT = "%Y-%m-%d"


class DataPoint(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "date": "1947-01-01",
                "value": 243.1
            }
        },
    )

    date: dt.date = Field(..., description="First day of the reported quarter")
    value: float = Field(..., description="GDP in billions of dollars")

    @property
    def date_string(self) -> str:
        return self.date.strftime(DATE_FORMAT)

    @property
    def quarter(self) -> int:
        # date.month is 1-indexed
        return get_quarter(self.date.month - 1)
