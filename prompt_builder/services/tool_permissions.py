"""
Tool permission strings for the agent.

The allowed set is a fixed base plus exactly one comment update tool. Inline
review comments get the PR comment tool; every other event gets the issue
comment tool. The prompt's tool usage example is derived from the same check.
"""

from typing import Optional

from prompt_builder.models.event_data import EventData, PullRequestReviewCommentEventData


BASE_ALLOWED_TOOLS = [
    "Edit",
    "Glob",
    "Grep",
    "LS",
    "Read",
    "Write",
    "mcp__github_file_ops__commit_files",
    "mcp__github_file_ops__delete_files",
]
DISALLOWED_TOOLS = ["WebSearch", "WebFetch"]

UPDATE_PR_COMMENT_TOOL = "mcp__github_file_ops__update_pull_request_comment"
UPDATE_ISSUE_COMMENT_TOOL = "mcp__github_file_ops__update_issue_comment"


def is_inline_review_comment(event_data: EventData) -> bool:
    """Whether the event is an inline comment on a PR diff."""
    return isinstance(event_data, PullRequestReviewCommentEventData)


def comment_update_tool(event_data: EventData) -> str:
    """Name of the single comment update tool granted for the event."""
    if is_inline_review_comment(event_data):
        return UPDATE_PR_COMMENT_TOOL
    return UPDATE_ISSUE_COMMENT_TOOL


def _join_tools(base: list, custom: Optional[str]) -> str:
    tools = ",".join(base)
    if custom:
        tools = f"{tools},{custom}"
    return tools


def build_allowed_tools(event_data: EventData, custom_allowed_tools: Optional[str] = None) -> str:
    """
    Build the comma-separated allowed tool list.

    Custom tools are appended verbatim after the base set.
    """
    return _join_tools(BASE_ALLOWED_TOOLS + [comment_update_tool(event_data)], custom_allowed_tools)


def build_disallowed_tools(custom_disallowed_tools: Optional[str] = None) -> str:
    """Build the comma-separated disallowed tool list."""
    return _join_tools(DISALLOWED_TOOLS, custom_disallowed_tools)
