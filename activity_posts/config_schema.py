from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

PositiveInt = Annotated[int, Field(ge=1)]
NonNegativeInt = Annotated[int, Field(ge=0)]


def _non_empty_name(value: str) -> str:
    name = (value or "").strip()
    if not name:
        raise ValueError("must be a non-empty field name")
    return name


class FeedConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    text_field: str = "text"
    time_field: str = "created_at"

    @field_validator("text_field", "time_field")
    @classmethod
    def _field_names_must_be_set(cls, v: str) -> str:
        return _non_empty_name(v)


class BatchConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_workers: PositiveInt = 1


class ReportConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    top_n: PositiveInt = 3
    percent_decimals: NonNegativeInt = Field(2, le=6)


class ExportConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    excel: bool = True
    filename: str = "classified.xlsx"

    @field_validator("filename")
    @classmethod
    def _filename_must_be_xlsx(cls, v: str) -> str:
        name = (v or "").strip()
        if not name.lower().endswith(".xlsx") or name.lower() == ".xlsx":
            raise ValueError("must be a file name ending in .xlsx")
        if "/" in name or "\\" in name:
            raise ValueError("must be a bare file name, not a path")
        return name


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    feed: FeedConfig = Field(default_factory=FeedConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
