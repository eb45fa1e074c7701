"""Raw webhook event context models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class GitHubUser(BaseModel):
    """GitHub user referenced by a webhook payload."""

    model_config = ConfigDict(extra="ignore")

    login: str


class PayloadComment(BaseModel):
    """Issue comment or inline review comment."""

    model_config = ConfigDict(extra="ignore")

    id: int
    body: Optional[str] = None
    user: GitHubUser


class PayloadReview(BaseModel):
    """Pull request review. A review may be submitted without a body."""

    model_config = ConfigDict(extra="ignore")

    body: Optional[str] = None
    user: GitHubUser


class PayloadIssue(BaseModel):
    """Issue (or PR addressed as an issue)."""

    model_config = ConfigDict(extra="ignore")

    number: Optional[int] = None
    user: GitHubUser


class EventPayload(BaseModel):
    """Webhook payload; which sub-objects are present depends on the event."""

    model_config = ConfigDict(extra="ignore")

    comment: Optional[PayloadComment] = None
    review: Optional[PayloadReview] = None
    issue: Optional[PayloadIssue] = None
    pull_request: Optional[dict] = None


class RepositoryRef(BaseModel):
    """Repository the event belongs to."""

    model_config = ConfigDict(extra="ignore")

    full_name: str


class ContextInputs(BaseModel):
    """User-supplied action inputs."""

    trigger_phrase: Optional[str] = None
    assignee_trigger: Optional[str] = None
    custom_instructions: Optional[str] = None
    allowed_tools: Optional[str] = None
    disallowed_tools: Optional[str] = None
    direct_prompt: Optional[str] = None


class RawEventContext(BaseModel):
    """Parsed webhook context as handed over by the caller."""

    repository: RepositoryRef
    event_name: str
    event_action: Optional[str] = None
    is_pr: bool
    entity_number: int
    payload: EventPayload = EventPayload()
    inputs: ContextInputs = ContextInputs()
