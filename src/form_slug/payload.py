"""Settings payload passed to the client-side slug script."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SettingsPayload(BaseModel):
    """Snapshot of a slug control's client settings taken at render time.

    Serializes as ``{"toggle", "onetime", "forceEdit", "fields"}``; the
    ``fields`` entries are CSS id selectors.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    toggle: str
    onetime: bool
    force_edit: bool = Field(alias="forceEdit")
    fields: List[str] = Field(default_factory=list)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
