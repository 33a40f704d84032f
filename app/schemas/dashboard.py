from pydantic import BaseModel, Field


class DashboardCount(BaseModel):
    """One bucket of a dashboard chart; ``_id`` is the bucket label."""

    id: str | None = Field(alias="_id")
    count: int

    model_config = {"populate_by_name": True}
