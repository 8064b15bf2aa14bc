"""Label models."""

from pydantic import Field

from fortnoxpy.models.common import FortnoxModel, FortnoxPayload
from fortnoxpy.scalars import Intish


class Label(FortnoxModel):
    id: Intish = Field(0, alias="Id")
    description: str = ""


class LabelPayload(FortnoxPayload):
    """Body for creating or renaming a label."""

    description: str


class LabelResponse(FortnoxModel):
    label: Label


class ListLabelsResponse(FortnoxModel):
    labels: list[Label] = Field(default_factory=list)
