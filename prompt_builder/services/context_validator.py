"""
Event context validator.

Normalizes a raw webhook context into one PreparedContext carrying exactly
one EventData variant. The variant is selected by (event name, event action,
is-PR flag); every field the variant requires is checked here so that
consumers never see a partially populated record.
"""

from typing import NamedTuple, Optional

from prompt_builder.errors import (
    MissingRequiredFieldError,
    UnsupportedEventKindError,
    UnsupportedIssueActionError,
)
from prompt_builder.models.event_context import EventPayload, RawEventContext
from prompt_builder.models.event_data import (
    EventData,
    IssueAssignedEventData,
    IssueCommentEventData,
    IssueOpenedEventData,
    PullRequestCommentEventData,
    PullRequestEventData,
    PullRequestReviewCommentEventData,
    PullRequestReviewEventData,
)
from prompt_builder.models.prepared_context import DEFAULT_TRIGGER_PHRASE, PreparedContext
from prompt_builder.utils.logging import get_logger, log_event_normalized


logger = get_logger(__name__)


class TriggerDetails(NamedTuple):
    """Who triggered the run and with which comment."""

    username: Optional[str] = None
    comment_id: Optional[str] = None
    comment_body: Optional[str] = None


def extract_trigger_details(payload: EventPayload) -> TriggerDetails:
    """
    Extract trigger identity and comment/review body from the payload.

    The payload shape is resolved from which sub-objects are present:
    issue comment (comment + issue), PR review (review), PR review comment
    (comment without issue) and bare issue (issue only).

    Args:
        payload: Webhook payload

    Returns:
        TriggerDetails with the fields the payload provides
    """
    if payload.comment is not None and payload.issue is not None:
        return TriggerDetails(
            username=payload.comment.user.login,
            comment_id=str(payload.comment.id),
            comment_body=payload.comment.body,
        )
    if payload.review is not None:
        # A review can be submitted without any text
        return TriggerDetails(
            username=payload.review.user.login,
            comment_body=payload.review.body or "",
        )
    if payload.comment is not None:
        return TriggerDetails(
            username=payload.comment.user.login,
            comment_id=str(payload.comment.id),
            comment_body=payload.comment.body,
        )
    if payload.issue is not None:
        return TriggerDetails(username=payload.issue.user.login)
    return TriggerDetails()


def _require(event_kind: str, **fields: Optional[str]) -> None:
    """Raise for the first field (in keyword order) that is empty or absent."""
    for name, value in fields.items():
        if not value:
            raise MissingRequiredFieldError(event_kind, name)


def _present(**fields: Optional[str]) -> dict:
    """Keep only the optional fields that actually carry a value."""
    return {name: value for name, value in fields.items() if value}


def _build_event_data(
    raw: RawEventContext,
    trigger: TriggerDetails,
    assignee_trigger: Optional[str],
    default_branch: Optional[str],
    working_branch: Optional[str],
) -> EventData:
    event_name = raw.event_name
    event_action = raw.event_action
    entity_number = str(raw.entity_number)
    pr_number = entity_number if raw.is_pr else None
    issue_number = None if raw.is_pr else entity_number
    branches = _present(working_branch=working_branch, default_branch=default_branch)

    if event_name == "pull_request_review_comment":
        _require(event_name, pr_number=pr_number, comment_body=trigger.comment_body)
        return PullRequestReviewCommentEventData(
            pr_number=pr_number,
            comment_body=trigger.comment_body,
            **_present(comment_id=trigger.comment_id),
            **branches,
        )

    if event_name == "pull_request_review":
        # The review body is the one comment body allowed to be empty
        _require(event_name, pr_number=pr_number)
        return PullRequestReviewEventData(
            pr_number=pr_number,
            comment_body=trigger.comment_body or "",
            **branches,
        )

    if event_name == "issue_comment":
        _require(event_name, comment_id=trigger.comment_id, comment_body=trigger.comment_body)
        if raw.is_pr:
            _require(event_name, pr_number=pr_number)
            return PullRequestCommentEventData(
                comment_id=trigger.comment_id,
                pr_number=pr_number,
                comment_body=trigger.comment_body,
                **branches,
            )
        _require(
            event_name,
            working_branch=working_branch,
            default_branch=default_branch,
            issue_number=issue_number,
        )
        return IssueCommentEventData(
            comment_id=trigger.comment_id,
            working_branch=working_branch,
            default_branch=default_branch,
            issue_number=issue_number,
            comment_body=trigger.comment_body,
        )

    if event_name == "issues":
        _require(
            event_name,
            event_action=event_action,
            issue_number=issue_number,
            default_branch=default_branch,
            working_branch=working_branch,
        )
        if event_action == "assigned":
            _require("issues assigned", assignee_trigger=assignee_trigger)
            return IssueAssignedEventData(
                issue_number=issue_number,
                default_branch=default_branch,
                working_branch=working_branch,
                assignee_trigger=assignee_trigger,
            )
        if event_action == "opened":
            return IssueOpenedEventData(
                issue_number=issue_number,
                default_branch=default_branch,
                working_branch=working_branch,
            )
        raise UnsupportedIssueActionError(event_action)

    if event_name == "pull_request":
        _require(event_name, pr_number=pr_number)
        return PullRequestEventData(
            pr_number=pr_number,
            **_present(event_action=event_action),
            **branches,
        )

    raise UnsupportedEventKindError(event_name)


def prepare_context(
    raw: RawEventContext,
    agent_comment_id: str,
    default_branch: Optional[str] = None,
    working_branch: Optional[str] = None,
) -> PreparedContext:
    """
    Normalize a raw webhook context into a PreparedContext.

    Args:
        raw: Raw webhook context
        agent_comment_id: ID of the comment the agent reports progress in
        default_branch: Repository default branch, if known
        working_branch: Branch the agent pushes to, if one was created

    Returns:
        Immutable prepared context

    Raises:
        MissingRequiredFieldError: If the resolved variant lacks a required field
        UnsupportedEventKindError: If the event name is not supported
        UnsupportedIssueActionError: If an issues event has an unsupported action
    """
    inputs = raw.inputs
    trigger = extract_trigger_details(raw.payload)

    event_data = _build_event_data(
        raw,
        trigger,
        assignee_trigger=inputs.assignee_trigger,
        default_branch=default_branch,
        working_branch=working_branch,
    )

    prepared = PreparedContext(
        repository=raw.repository.full_name,
        agent_comment_id=agent_comment_id,
        trigger_phrase=inputs.trigger_phrase or DEFAULT_TRIGGER_PHRASE,
        event_data=event_data,
        **_present(
            trigger_username=trigger.username,
            custom_instructions=inputs.custom_instructions,
            allowed_tools=inputs.allowed_tools,
            disallowed_tools=inputs.disallowed_tools,
            direct_prompt=inputs.direct_prompt,
            working_branch=working_branch,
        ),
    )

    log_event_normalized(
        logger,
        repository=prepared.repository,
        event_name=raw.event_name,
        event_action=raw.event_action,
        entity_number=str(raw.entity_number),
    )
    return prepared
