"""Filter intents describing which issues a search should select."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ByAssignee(BaseModel):
    """Select issues assigned to a user."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["assignee"] = "assignee"
    username: str = Field(default=..., min_length=1, description="Jira username, inserted unquoted")


class ByLabel(BaseModel):
    """Select issues carrying a single label."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["label"] = "label"
    label: str = Field(default=..., min_length=1, description="Label value")


class ByLabels(BaseModel):
    """Select issues carrying all (or any) of several labels."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["labels"] = "labels"
    labels: tuple[str, ...] = Field(default=..., description="Labels in query order")
    match_all: bool = Field(default=False, description="Join with AND when True, OR otherwise")

    @field_validator("labels")
    @classmethod
    def validate_labels_not_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Require at least one label."""
        if not v:
            raise ValueError("labels must contain at least one label")
        return v


FilterIntent = Annotated[Union[ByAssignee, ByLabel, ByLabels], Field(discriminator="kind")]
