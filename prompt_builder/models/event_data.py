"""
Normalized event data variants.

Each supported webhook event maps to exactly one of the models below.
Required fields are enforced at construction; optional fields stay None when
their source data is absent.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict


class _EventDataBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class PullRequestReviewCommentEventData(_EventDataBase):
    """Inline review comment on a pull request diff."""

    event_name: Literal["pull_request_review_comment"] = "pull_request_review_comment"
    is_pr: Literal[True] = True
    pr_number: str
    comment_id: Optional[str] = None
    comment_body: str
    working_branch: Optional[str] = None
    default_branch: Optional[str] = None


class PullRequestReviewEventData(_EventDataBase):
    """Submitted pull request review. The body may be empty."""

    event_name: Literal["pull_request_review"] = "pull_request_review"
    is_pr: Literal[True] = True
    pr_number: str
    comment_body: str
    working_branch: Optional[str] = None
    default_branch: Optional[str] = None


class PullRequestCommentEventData(_EventDataBase):
    """Conversation comment on a pull request."""

    event_name: Literal["issue_comment"] = "issue_comment"
    comment_id: str
    is_pr: Literal[True] = True
    pr_number: str
    comment_body: str
    working_branch: Optional[str] = None
    default_branch: Optional[str] = None


class IssueCommentEventData(_EventDataBase):
    """Comment on a plain issue."""

    event_name: Literal["issue_comment"] = "issue_comment"
    comment_id: str
    is_pr: Literal[False] = False
    working_branch: str
    default_branch: str
    issue_number: str
    comment_body: str


class IssueAssignedEventData(_EventDataBase):
    """Issue assigned to the configured assignee trigger."""

    event_name: Literal["issues"] = "issues"
    event_action: Literal["assigned"] = "assigned"
    is_pr: Literal[False] = False
    issue_number: str
    default_branch: str
    working_branch: str
    assignee_trigger: str


class IssueOpenedEventData(_EventDataBase):
    """Newly opened issue."""

    event_name: Literal["issues"] = "issues"
    event_action: Literal["opened"] = "opened"
    is_pr: Literal[False] = False
    issue_number: str
    default_branch: str
    working_branch: str


class PullRequestEventData(_EventDataBase):
    """Pull request lifecycle event (opened, synchronize, ...)."""

    event_name: Literal["pull_request"] = "pull_request"
    event_action: Optional[str] = None
    is_pr: Literal[True] = True
    pr_number: str
    working_branch: Optional[str] = None
    default_branch: Optional[str] = None


EventData = Union[
    PullRequestReviewCommentEventData,
    PullRequestReviewEventData,
    PullRequestCommentEventData,
    IssueCommentEventData,
    IssueAssignedEventData,
    IssueOpenedEventData,
    PullRequestEventData,
]

# Variants that carry the comment or review that triggered the run
TRIGGER_COMMENT_EVENTS = (
    PullRequestReviewCommentEventData,
    PullRequestReviewEventData,
    PullRequestCommentEventData,
    IssueCommentEventData,
)
