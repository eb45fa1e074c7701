"""
Unit tests for tool permission strings.
"""

import pytest

from prompt_builder.models import (
    IssueAssignedEventData,
    IssueCommentEventData,
    IssueOpenedEventData,
    PullRequestCommentEventData,
    PullRequestEventData,
    PullRequestReviewCommentEventData,
    PullRequestReviewEventData,
)
from prompt_builder.services.tool_permissions import (
    BASE_ALLOWED_TOOLS,
    UPDATE_ISSUE_COMMENT_TOOL,
    UPDATE_PR_COMMENT_TOOL,
    build_allowed_tools,
    build_disallowed_tools,
    comment_update_tool,
)


REVIEW_COMMENT = PullRequestReviewCommentEventData(pr_number="1", comment_body="fix")

OTHER_EVENTS = [
    PullRequestReviewEventData(pr_number="1", comment_body=""),
    PullRequestCommentEventData(comment_id="2", pr_number="1", comment_body="fix"),
    IssueCommentEventData(
        comment_id="2", working_branch="b", default_branch="main", issue_number="1", comment_body="fix"
    ),
    IssueAssignedEventData(issue_number="1", default_branch="main", working_branch="b", assignee_trigger="a"),
    IssueOpenedEventData(issue_number="1", default_branch="main", working_branch="b"),
    PullRequestEventData(pr_number="1"),
]


class TestBuildAllowedTools:
    """Test allowed tool string construction."""

    def test_review_comment_gets_pr_comment_tool(self):
        tools = build_allowed_tools(REVIEW_COMMENT).split(",")

        assert UPDATE_PR_COMMENT_TOOL in tools
        assert UPDATE_ISSUE_COMMENT_TOOL not in tools

    @pytest.mark.parametrize("event_data", OTHER_EVENTS)
    def test_other_events_get_issue_comment_tool(self, event_data):
        tools = build_allowed_tools(event_data).split(",")

        assert UPDATE_ISSUE_COMMENT_TOOL in tools
        assert UPDATE_PR_COMMENT_TOOL not in tools

    def test_base_tools_come_first(self):
        tools = build_allowed_tools(REVIEW_COMMENT).split(",")

        assert tools[:len(BASE_ALLOWED_TOOLS)] == BASE_ALLOWED_TOOLS
        assert len(tools) == len(BASE_ALLOWED_TOOLS) + 1

    def test_custom_tools_appended(self):
        tools = build_allowed_tools(REVIEW_COMMENT, "Bash")

        assert tools.endswith(",Bash")
        assert tools == ",".join(BASE_ALLOWED_TOOLS + [UPDATE_PR_COMMENT_TOOL, "Bash"])

    def test_custom_tools_not_deduplicated(self):
        tools = build_allowed_tools(OTHER_EVENTS[0], "Edit,Edit")

        assert tools.endswith(f"{UPDATE_ISSUE_COMMENT_TOOL},Edit,Edit")

    def test_empty_custom_tools_ignored(self):
        assert not build_allowed_tools(OTHER_EVENTS[0], "").endswith(",")


class TestBuildDisallowedTools:
    """Test disallowed tool string construction."""

    def test_base(self):
        assert build_disallowed_tools() == "WebSearch,WebFetch"

    def test_custom_tools_appended(self):
        assert build_disallowed_tools("Bash(rm:*)") == "WebSearch,WebFetch,Bash(rm:*)"


class TestCommentUpdateTool:
    """Test the comment tool choice shared with the prompt."""

    def test_review_comment(self):
        assert comment_update_tool(REVIEW_COMMENT) == UPDATE_PR_COMMENT_TOOL

    @pytest.mark.parametrize("event_data", OTHER_EVENTS)
    def test_other_events(self, event_data):
        assert comment_update_tool(event_data) == UPDATE_ISSUE_COMMENT_TOOL
