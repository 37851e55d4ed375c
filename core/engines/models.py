"""Storage engine data models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from core.types import SupportLevel, VariableKind


class EngineVariable(BaseModel):
    """Known server variable of an engine."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""
    kind: VariableKind = VariableKind.PLAINTEXT


class VariableStatus(BaseModel):
    """Current value of an engine variable, ready for display."""

    name: str
    title: str
    value: str
    kind: VariableKind = VariableKind.PLAINTEXT
    description: str = ""
    formatted: str = Field(default="", description="Value formatted for its kind")


class EngineSummary(BaseModel):
    """Entry of the engine picker list."""

    name: str
    comment: str = ""
    is_default: bool = False


class EngineDetails(BaseModel):
    """Descriptor of one engine as exposed to API consumers."""

    engine_id: str
    title: str
    comment: str
    support: SupportLevel
    support_message: str
    help_page: str
    info_pages: dict[str, str] = Field(default_factory=dict)
    variables: list[VariableStatus] = Field(default_factory=list)


class EnginePage(BaseModel):
    """Engine specific information page."""

    page_id: str
    title: str
    text: str | None = None
    values: dict[str, Any] = Field(default_factory=dict)
