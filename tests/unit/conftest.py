"""
Shared fixtures for prompt builder unit tests.
"""

from typing import Any, Dict, Optional

import pytest

from prompt_builder.models import (
    Author,
    ChangedFileWithSHA,
    CommentData,
    FetchedData,
    IssueData,
    PullRequestData,
    RawEventContext,
    ReviewCommentData,
    ReviewData,
)


def _comment(body: Optional[str] = "@claude please fix the tests", login: str = "octocat") -> Dict[str, Any]:
    return {"id": 4242, "body": body, "user": {"login": login}}


def build_payload(event_name: str, is_pr: bool, body: Optional[str] = "@claude please fix the tests") -> Dict[str, Any]:
    """Webhook payload shaped like the given event."""
    issue = {"number": 7, "user": {"login": "issue-author"}}
    if event_name == "issue_comment":
        if is_pr:
            issue["pull_request"] = {"url": "https://api.github.com/repos/o/r/pulls/7"}
        return {"comment": _comment(body), "issue": issue}
    if event_name == "pull_request_review":
        return {"review": {"body": body, "user": {"login": "reviewer"}}, "pull_request": {"number": 7}}
    if event_name == "pull_request_review_comment":
        return {"comment": _comment(body, login="inline-reviewer"), "pull_request": {"number": 7}}
    if event_name == "issues":
        return {"issue": issue}
    if event_name == "pull_request":
        return {"pull_request": {"number": 7, "user": {"login": "pr-author"}}}
    return {}


@pytest.fixture
def make_raw_context():
    """Factory for RawEventContext instances."""

    def _make(
        event_name: str = "issue_comment",
        is_pr: bool = False,
        event_action: Optional[str] = None,
        entity_number: int = 7,
        payload: Optional[Dict[str, Any]] = None,
        body: Optional[str] = "@claude please fix the tests",
        **inputs: Any,
    ) -> RawEventContext:
        return RawEventContext.model_validate({
            "repository": {"full_name": "octo-org/octo-repo"},
            "event_name": event_name,
            "event_action": event_action,
            "is_pr": is_pr,
            "entity_number": entity_number,
            "payload": payload if payload is not None else build_payload(event_name, is_pr, body),
            "inputs": inputs,
        })

    return _make


@pytest.fixture
def issue_fetched_data():
    """Fetched data for an issue."""
    return FetchedData(
        context_data=IssueData(
            title="Crash on startup",
            author=Author(login="issue-author"),
            state="OPEN",
            body="The app crashes.<!-- internal note -->",
        ),
        comments=[
            CommentData(
                id="1",
                author=Author(login="octocat"),
                body="@claude please fix the tests",
                created_at="2024-01-01T00:00:00Z",
            ),
        ],
    )


@pytest.fixture
def pr_fetched_data():
    """Fetched data for a pull request."""
    return FetchedData(
        context_data=PullRequestData(
            title="Add retries",
            author=Author(login="pr-author"),
            state="OPEN",
            body="Adds retries to the client.",
            head_ref_name="feature-x",
            base_ref_name="main",
            additions=10,
            deletions=2,
            total_commits=3,
            changed_files=1,
        ),
        comments=[],
        review_data=[
            ReviewData(
                id="r1",
                author=Author(login="reviewer"),
                state="COMMENTED",
                submitted_at="2024-01-02T00:00:00Z",
                body="Looks good overall",
                comments=[
                    ReviewCommentData(
                        id="c1",
                        author=Author(login="reviewer"),
                        body="Rename this",
                        path="src/client.py",
                        line=12,
                    ),
                ],
            ),
        ],
        changed_files_with_sha=[
            ChangedFileWithSHA(
                path="src/client.py",
                change_type="MODIFIED",
                additions=10,
                deletions=2,
                sha="abc123",
            ),
        ],
    )
