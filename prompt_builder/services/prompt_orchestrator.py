"""
Prompt orchestrator.

Sequences normalization, rendering and tool permission building, writes the
prompt to its well-known path and exports the permission strings to the
calling environment. Any failure is logged and ends the process with exit
status 1; the prompt file is only replaced once rendering has succeeded.
"""

import os
import tempfile
import uuid
from pathlib import Path
from typing import Dict, Optional

from prompt_builder.config import settings
from prompt_builder.errors import PromptBuilderError, PromptWriteError
from prompt_builder.models.event_context import RawEventContext
from prompt_builder.models.fetched_data import FetchedData
from prompt_builder.models.prompt_result import PromptResult
from prompt_builder.services.context_validator import prepare_context
from prompt_builder.services.prompt_synthesizer import generate_prompt
from prompt_builder.services.tool_permissions import (
    build_allowed_tools,
    build_disallowed_tools,
)
from prompt_builder.utils.logging import (
    get_logger,
    log_error_with_context,
    log_phase_transition,
)


logger = get_logger(__name__)

ALLOWED_TOOLS_VAR = "ALLOWED_TOOLS"
DISALLOWED_TOOLS_VAR = "DISALLOWED_TOOLS"
PROMPT_FILE_MODE = 0o644


def build_prompt(
    raw: RawEventContext,
    agent_comment_id: str,
    default_branch: Optional[str],
    working_branch: Optional[str],
    fetched: FetchedData,
    server_url: Optional[str] = None,
) -> PromptResult:
    """
    Build the prompt and tool permission strings without side effects.

    Args:
        raw: Raw webhook context
        agent_comment_id: ID of the agent's progress comment
        default_branch: Repository default branch, if known
        working_branch: Branch the agent pushes to, if any
        fetched: Fetched issue/PR data
        server_url: GitHub server URL (defaults to settings)

    Returns:
        PromptResult with prompt text and tool strings

    Raises:
        ContextValidationError: If the context cannot be normalized
    """
    log_phase_transition(logger, "normalize", "started")
    context = prepare_context(raw, agent_comment_id, default_branch, working_branch)
    log_phase_transition(logger, "normalize", "completed")

    log_phase_transition(logger, "render", "started")
    prompt = generate_prompt(context, fetched, server_url)
    log_phase_transition(logger, "render", "completed")

    return PromptResult(
        prompt=prompt,
        allowed_tools=build_allowed_tools(context.event_data, context.allowed_tools),
        disallowed_tools=build_disallowed_tools(context.disallowed_tools),
    )


def write_prompt_file(prompt: str, directory: str, filename: str) -> Path:
    """
    Write the prompt atomically to directory/filename.

    The text goes to a temporary file in the same directory first, which then
    replaces the target, so readers never observe a partial prompt.

    Args:
        prompt: Prompt text
        directory: Output directory (created if missing)
        filename: Output file name

    Returns:
        Path of the written prompt file

    Raises:
        PromptWriteError: If the directory or file cannot be written
    """
    target = Path(directory) / filename
    tmp_path = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=target.parent, prefix=f".{filename}.", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
            tmp_file.write(prompt)
        os.chmod(tmp_path, PROMPT_FILE_MODE)
        os.replace(tmp_path, target)
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise PromptWriteError(f"Failed to write prompt file {target}: {e}") from e

    logger.info(f"Prompt written to {target}", extra={"prompt_chars": len(prompt)})
    return target


def export_variables(variables: Dict[str, str], env_file: Optional[str] = None) -> None:
    """
    Export variables to this process and, if configured, to later workflow steps.

    All env-file blocks are appended in a single write so that a failure
    never leaves only some of the variables exported.

    Args:
        variables: Variable names and values
        env_file: GitHub Actions env file to append to

    Raises:
        PromptWriteError: If the env file cannot be written
    """
    if env_file:
        blocks = []
        for name, value in variables.items():
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            blocks.append(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        try:
            with open(env_file, "a", encoding="utf-8") as f:
                f.write("".join(blocks))
        except OSError as e:
            names = ", ".join(variables)
            raise PromptWriteError(f"Failed to export {names} to {env_file}: {e}") from e

    os.environ.update(variables)


def create_prompt(
    agent_comment_id: int,
    default_branch: Optional[str],
    working_branch: Optional[str],
    fetched: FetchedData,
    raw: RawEventContext,
    prompt_dir: Optional[str] = None,
    prompt_filename: Optional[str] = None,
    env_file: Optional[str] = None,
    server_url: Optional[str] = None,
) -> PromptResult:
    """
    Build the prompt, write it and export the tool permission strings.

    Args:
        agent_comment_id: ID of the agent's progress comment
        default_branch: Repository default branch, if known
        working_branch: Branch the agent pushes to, if any
        fetched: Fetched issue/PR data
        raw: Raw webhook context
        prompt_dir: Output directory (defaults to settings)
        prompt_filename: Output file name (defaults to settings)
        env_file: Actions env file (defaults to settings)
        server_url: GitHub server URL (defaults to settings)

    Returns:
        PromptResult that was written and exported

    Raises:
        SystemExit: With status 1 if any step fails
    """
    run_logger = logger.with_context(
        repository=raw.repository.full_name,
        event_name=raw.event_name,
    )
    try:
        result = build_prompt(
            raw,
            str(agent_comment_id),
            default_branch,
            working_branch,
            fetched,
            server_url,
        )
        run_logger.debug(f"Final prompt:\n{result.prompt}")

        log_phase_transition(run_logger, "write", "started")
        write_prompt_file(
            result.prompt,
            prompt_dir or settings.prompt_dir,
            prompt_filename or settings.prompt_filename,
        )
        env_file = env_file or settings.github_env
        export_variables(
            {
                ALLOWED_TOOLS_VAR: result.allowed_tools,
                DISALLOWED_TOOLS_VAR: result.disallowed_tools,
            },
            env_file,
        )
        log_phase_transition(run_logger, "write", "completed")
    except PromptBuilderError as e:
        log_error_with_context(run_logger, f"Create prompt failed with error: {e}", e)
        raise SystemExit(1) from e

    return result
