"""
Utility modules for the prompt builder.
"""

from prompt_builder.utils.logging import (
    get_logger,
    setup_logging,
    log_event_normalized,
    log_phase_transition,
    log_error_with_context,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "log_event_normalized",
    "log_phase_transition",
    "log_error_with_context",
]
