"""Business logic services package."""

from prompt_builder.services.context_validator import (
    TriggerDetails,
    extract_trigger_details,
    prepare_context,
)
from prompt_builder.services.event_classifier import (
    EventClassification,
    classify_event,
)
from prompt_builder.services.tool_permissions import (
    build_allowed_tools,
    build_disallowed_tools,
    comment_update_tool,
)
from prompt_builder.services.prompt_synthesizer import generate_prompt
from prompt_builder.services.prompt_orchestrator import (
    build_prompt,
    create_prompt,
    export_variables,
    write_prompt_file,
)

__all__ = [
    'TriggerDetails',
    'extract_trigger_details',
    'prepare_context',
    'EventClassification',
    'classify_event',
    'build_allowed_tools',
    'build_disallowed_tools',
    'comment_update_tool',
    'generate_prompt',
    'build_prompt',
    'create_prompt',
    'export_variables',
    'write_prompt_file',
]
