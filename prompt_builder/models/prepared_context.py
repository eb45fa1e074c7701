"""Prepared (normalized) context models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .event_data import EventData


DEFAULT_TRIGGER_PHRASE = "@claude"


class CommonFields(BaseModel):
    """Fields shared by every event variant."""

    model_config = ConfigDict(frozen=True)

    repository: str
    agent_comment_id: str
    trigger_phrase: str = DEFAULT_TRIGGER_PHRASE
    trigger_username: Optional[str] = None
    custom_instructions: Optional[str] = None
    allowed_tools: Optional[str] = None
    disallowed_tools: Optional[str] = None
    direct_prompt: Optional[str] = None
    working_branch: Optional[str] = None


class PreparedContext(CommonFields):
    """Common fields plus the normalized event data."""

    event_data: EventData
