from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, RootModel, field_validator


class SubModel(BaseModel):
    name: str
    when: str
    # allow other fields (notes, links, etc.)

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    @field_validator("when")
    @classmethod
    def not_blank(cls, v):  # noqa D401
        """A task without a rule can never be scheduled."""
        if not v.strip():
            raise ValueError("when must not be empty")
        return v


class GroupModel(BaseModel):
    name: str
    subs: List[SubModel] = []

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    @field_validator("subs", mode="before")
    @classmethod
    def none_is_empty(cls, v):  # noqa D401
        """Allow an empty `subs:` key in YAML."""
        if v is None:
            return []
        return v


class ScheduleModel(RootModel[List[GroupModel]]):
    pass
