"""Classify normalized event data for display in the prompt."""

from typing import NamedTuple

from prompt_builder.errors import UnexpectedEventKindError
from prompt_builder.models.event_data import (
    IssueAssignedEventData,
    IssueCommentEventData,
    IssueOpenedEventData,
    PullRequestCommentEventData,
    PullRequestEventData,
    PullRequestReviewCommentEventData,
    PullRequestReviewEventData,
)
from prompt_builder.models.prepared_context import PreparedContext


class EventClassification(NamedTuple):
    """Event category label and a short description of the trigger."""

    category: str
    trigger_description: str


def classify_event(context: PreparedContext) -> EventClassification:
    """
    Map the prepared context's event data to its category.

    Args:
        context: Prepared context

    Returns:
        EventClassification for the event

    Raises:
        UnexpectedEventKindError: If the event data is not a known variant
    """
    event_data = context.event_data
    phrase = context.trigger_phrase

    if isinstance(event_data, PullRequestReviewCommentEventData):
        return EventClassification("REVIEW_COMMENT", f"PR review comment with '{phrase}'")
    if isinstance(event_data, PullRequestReviewEventData):
        return EventClassification("PR_REVIEW", f"PR review with '{phrase}'")
    if isinstance(event_data, (PullRequestCommentEventData, IssueCommentEventData)):
        return EventClassification("GENERAL_COMMENT", f"issue comment with '{phrase}'")
    if isinstance(event_data, IssueOpenedEventData):
        return EventClassification("ISSUE_CREATED", f"new issue with '{phrase}' in body")
    if isinstance(event_data, IssueAssignedEventData):
        return EventClassification(
            "ISSUE_ASSIGNED", f"issue assigned to '{event_data.assignee_trigger}'"
        )
    if isinstance(event_data, PullRequestEventData):
        if event_data.event_action:
            return EventClassification("PULL_REQUEST", f"pull request {event_data.event_action}")
        return EventClassification("PULL_REQUEST", "pull request event")

    raise UnexpectedEventKindError(
        f"Unexpected event type: {type(event_data).__name__}"
    )
