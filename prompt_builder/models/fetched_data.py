"""Data fetched from the source-control API for prompt rendering."""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel


class Author(BaseModel):
    """Author of an issue, PR, comment or review."""

    login: str


class IssueData(BaseModel):
    """Issue metadata."""

    title: str
    author: Author
    state: str
    body: Optional[str] = None


class PullRequestData(IssueData):
    """Pull request metadata."""

    head_ref_name: str
    base_ref_name: str
    additions: int = 0
    deletions: int = 0
    total_commits: int = 0
    changed_files: int = 0


class CommentData(BaseModel):
    """Issue or PR conversation comment."""

    id: str
    author: Author
    body: str
    created_at: str


class ReviewCommentData(BaseModel):
    """Inline comment attached to a review."""

    id: str
    author: Author
    body: str
    path: str
    line: Optional[int] = None
    created_at: Optional[str] = None


class ReviewData(BaseModel):
    """Pull request review with its inline comments."""

    id: str
    author: Author
    state: str
    submitted_at: str
    body: Optional[str] = None
    comments: List[ReviewCommentData] = []


class ChangedFileWithSHA(BaseModel):
    """Changed file in a PR with its blob SHA."""

    path: str
    change_type: str
    additions: int
    deletions: int
    sha: str


class FetchedData(BaseModel):
    """Everything fetched for the issue or PR the event targets."""

    context_data: Optional[Union[PullRequestData, IssueData]] = None
    comments: List[CommentData] = []
    changed_files_with_sha: List[ChangedFileWithSHA] = []
    review_data: List[ReviewData] = []
    image_url_map: Dict[str, str] = {}
