"""
Formatting helpers for fetched issue and pull request data.

Author-supplied text has HTML comments removed before it is embedded in the
prompt, and downloaded image URLs are replaced by their local paths.
"""

import re
from typing import Dict, List, Optional, Union

from prompt_builder.models.fetched_data import (
    ChangedFileWithSHA,
    CommentData,
    IssueData,
    PullRequestData,
    ReviewData,
)


_HTML_COMMENT_PATTERN = re.compile(r"<!--[\s\S]*?-->")


def strip_html_comments(text: str) -> str:
    """Remove every <!-- ... --> span from text."""
    return _HTML_COMMENT_PATTERN.sub("", text)


def _replace_image_urls(text: str, image_url_map: Optional[Dict[str, str]]) -> str:
    if not image_url_map:
        return text
    for original_url, local_path in image_url_map.items():
        text = text.replace(original_url, local_path)
    return text


def _clean(text: str, image_url_map: Optional[Dict[str, str]]) -> str:
    return _replace_image_urls(strip_html_comments(text), image_url_map)


def format_context(data: Optional[Union[PullRequestData, IssueData]], is_pr: bool) -> str:
    """
    Format issue or PR metadata as a header block.

    Args:
        data: Fetched issue or PR metadata
        is_pr: Whether the event targets a pull request

    Returns:
        Formatted context, or empty string when no data was fetched
    """
    if data is None:
        return ""
    if is_pr and isinstance(data, PullRequestData):
        return "\n".join([
            f"PR Title: {data.title}",
            f"PR Author: {data.author.login}",
            f"PR Branch: {data.head_ref_name} -> {data.base_ref_name}",
            f"PR State: {data.state}",
            f"PR Additions: {data.additions}",
            f"PR Deletions: {data.deletions}",
            f"Total Commits: {data.total_commits}",
            f"Changed Files: {data.changed_files} files",
        ])
    return "\n".join([
        f"Issue Title: {data.title}",
        f"Issue Author: {data.author.login}",
        f"Issue State: {data.state}",
    ])


def format_body(body: str, image_url_map: Optional[Dict[str, str]] = None) -> str:
    return _clean(body, image_url_map)


def format_comments(comments: List[CommentData], image_url_map: Optional[Dict[str, str]] = None) -> str:
    """Format conversation comments, one block per comment."""
    return "\n\n".join(
        f"[{comment.author.login} at {comment.created_at}]: {_clean(comment.body, image_url_map)}"
        for comment in comments
    )


def format_review_comments(reviews: List[ReviewData], image_url_map: Optional[Dict[str, str]] = None) -> str:
    """
    Format reviews with their inline comments.

    Args:
        reviews: Reviews fetched for the PR
        image_url_map: Original image URL to local path mapping

    Returns:
        Formatted reviews separated by blank lines
    """
    formatted = []
    for review in reviews:
        output = f"[Review by {review.author.login} at {review.submitted_at}]: {review.state}"
        if review.body and review.body.strip():
            output += f"\n{_clean(review.body, image_url_map)}"
        if review.comments:
            inline = "\n".join(
                f"  [Comment on {comment.path}:{comment.line if comment.line is not None else '?'}]: "
                f"{_clean(comment.body, image_url_map)}"
                for comment in review.comments
            )
            output += f"\n{inline}"
        formatted.append(output)
    return "\n\n".join(formatted)


def format_changed_files_with_sha(files: List[ChangedFileWithSHA]) -> str:
    return "\n".join(
        f"- {f.path} ({f.change_type}) +{f.additions}/-{f.deletions} SHA: {f.sha}"
        for f in files
    )
