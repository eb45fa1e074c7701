"""Prompt building result model."""

from pydantic import BaseModel


class PromptResult(BaseModel):
    """Rendered prompt and the tool permission strings for the agent."""

    prompt: str
    allowed_tools: str
    disallowed_tools: str
