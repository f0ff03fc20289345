"""
Pydantic models for the monthly global-temperature variance dataset.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TemperatureRecord(BaseModel):
    """One month of the dataset: deviation from the base temperature."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    year: int
    month: int = Field(..., ge=1, le=12)
    variance: float  # °C delta from base

    @property
    def record_id(self) -> str:
        return f"{self.year}-{self.month}"


class Dataset(BaseModel):
    """Fetched payload: base temperature plus the ordered monthly records."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)

    base_temperature: float = Field(..., alias="baseTemperature")
    monthly_variance: list[TemperatureRecord] = Field(..., alias="monthlyVariance")

    @model_validator(mode="after")
    def check_unique_year_month(self) -> "Dataset":
        seen = set()
        for record in self.monthly_variance:
            key = (record.year, record.month)
            if key in seen:
                raise ValueError(f"Duplicate record for {record.year}-{record.month:02d}")
            seen.add(key)
        return self

    def distinct_years(self) -> list[int]:
        """Years in first-seen order, without repeats."""
        return list(dict.fromkeys(r.year for r in self.monthly_variance))

    def variance_extent(self) -> Optional[tuple[float, float]]:
        """(min, max) variance over all records, or None for an empty dataset."""
        if not self.monthly_variance:
            return None
        variances = [r.variance for r in self.monthly_variance]
        return min(variances), max(variances)

    def absolute_temperature(self, record: TemperatureRecord) -> float:
        return self.base_temperature + record.variance
