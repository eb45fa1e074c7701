"""Data models for the prompt builder."""

from .event_context import (
    ContextInputs,
    EventPayload,
    GitHubUser,
    PayloadComment,
    PayloadIssue,
    PayloadReview,
    RawEventContext,
    RepositoryRef,
)
from .event_data import (
    EventData,
    IssueAssignedEventData,
    IssueCommentEventData,
    IssueOpenedEventData,
    PullRequestCommentEventData,
    PullRequestEventData,
    PullRequestReviewCommentEventData,
    PullRequestReviewEventData,
    TRIGGER_COMMENT_EVENTS,
)
from .fetched_data import (
    Author,
    ChangedFileWithSHA,
    CommentData,
    FetchedData,
    IssueData,
    PullRequestData,
    ReviewCommentData,
    ReviewData,
)
from .prepared_context import CommonFields, DEFAULT_TRIGGER_PHRASE, PreparedContext
from .prompt_result import PromptResult

__all__ = [
    # Raw context models
    "RawEventContext",
    "RepositoryRef",
    "EventPayload",
    "PayloadComment",
    "PayloadReview",
    "PayloadIssue",
    "GitHubUser",
    "ContextInputs",
    # Event data variants
    "EventData",
    "PullRequestReviewCommentEventData",
    "PullRequestReviewEventData",
    "PullRequestCommentEventData",
    "IssueCommentEventData",
    "IssueAssignedEventData",
    "IssueOpenedEventData",
    "PullRequestEventData",
    "TRIGGER_COMMENT_EVENTS",
    # Prepared context models
    "CommonFields",
    "PreparedContext",
    "DEFAULT_TRIGGER_PHRASE",
    # Fetched data models
    "Author",
    "IssueData",
    "PullRequestData",
    "CommentData",
    "ReviewCommentData",
    "ReviewData",
    "ChangedFileWithSHA",
    "FetchedData",
    # Result models
    "PromptResult",
]
