"""
Exception hierarchy for prompt building.

Validation failures are raised eagerly while the event context is normalized,
before any prompt text exists. None of them is retryable: each one means the
caller supplied insufficient or unsupported inputs.
"""


class PromptBuilderError(Exception):
    """Base exception for prompt builder errors."""
    pass


class ContextValidationError(PromptBuilderError):
    """Raised when a raw event context cannot be normalized."""
    pass


class MissingRequiredFieldError(ContextValidationError):
    """A field required by the resolved event variant is absent."""

    def __init__(self, event_kind: str, field: str):
        self.event_kind = event_kind
        self.field = field
        super().__init__(f"{field} is required for {event_kind} event")


class UnsupportedEventKindError(ContextValidationError):
    """The event name is outside the supported set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unsupported event type: {name}")


class UnsupportedIssueActionError(ContextValidationError):
    """An issues event carried an action other than opened/assigned."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Unsupported issue action: {action}")


class UnexpectedEventKindError(PromptBuilderError):
    """Event data reached the classifier without a known category."""
    pass


class PromptWriteError(PromptBuilderError):
    """The prompt file or its directory could not be written."""
    pass
