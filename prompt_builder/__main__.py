"""
Command-line entry point.

Usage:
    python -m prompt_builder --context context.json --fetched fetched.json --comment-id 123
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from prompt_builder.config import settings
from prompt_builder.models.event_context import RawEventContext
from prompt_builder.models.fetched_data import FetchedData
from prompt_builder.services.prompt_orchestrator import create_prompt
from prompt_builder.utils.logging import get_logger, setup_logging


logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="prompt_builder",
        description="Build the agent prompt and tool permissions for a GitHub event",
    )
    parser.add_argument("--context", required=True, type=Path, help="Raw event context JSON file")
    parser.add_argument("--fetched", required=True, type=Path, help="Fetched issue/PR data JSON file")
    parser.add_argument("--comment-id", required=True, type=int, help="ID of the agent's progress comment")
    parser.add_argument("--default-branch", default=None, help="Repository default branch")
    parser.add_argument("--working-branch", default=None, help="Branch the agent pushes to")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging(settings.log_level)
    args = parse_args(argv)

    try:
        raw = RawEventContext.model_validate_json(args.context.read_text(encoding="utf-8"))
        fetched = FetchedData.model_validate_json(args.fetched.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        logger.error(f"Create prompt failed with error: {e}")
        return 1

    create_prompt(
        args.comment_id,
        args.default_branch,
        args.working_branch,
        fetched,
        raw,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
