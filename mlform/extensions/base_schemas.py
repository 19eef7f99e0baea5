from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class BaseField(BaseModel):
    """ Properties shared by every input field payload. Unknown keys are rejected. """
    model_config = ConfigDict(extra="forbid", frozen=True)

    title: Annotated[str, Field(min_length=1, max_length=100, pattern=r"^\S.*\S$")]
    description: Annotated[str, Field(min_length=1, max_length=500)] | None = None
    required: bool = True


class BaseReport(BaseModel):
    """ Properties shared by every report payload. Unknown keys are rejected. """
    model_config = ConfigDict(extra="forbid", frozen=True)

    title: Annotated[str, Field(min_length=1, max_length=100)] | None = None
    execution_time: Annotated[float, Field(ge=0)] | None = None
