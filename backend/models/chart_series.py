from pydantic import BaseModel, Field


class ChartSeries(BaseModel):
    labels: list[str] = Field(default_factory=list)
    data: list[float] = Field(default_factory=list)
