"""Custom exceptions for selectprompt.

This module defines a hierarchy of exceptions for different error types:
- SelectPromptError: Base exception for all selectprompt errors
- ConfigurationError: Prompt or settings configuration errors
- PromptCancelled: The user interrupted a running prompt
"""


class SelectPromptError(Exception):
    """Base exception for all selectprompt errors.

    All selectprompt-specific exceptions inherit from this class, allowing
    callers to catch all selectprompt errors with a single except clause.
    """

    pass


class ConfigurationError(SelectPromptError):
    """Configuration related errors.

    Raised before anything is displayed when a prompt cannot start, such as:
    - No selectable choice in the list (including an empty list)
    - Invalid page size
    - Malformed choice tokens or choices file
    """

    pass


class PromptCancelled(SelectPromptError):
    """The user interrupted a running prompt (Ctrl+C).

    Raised by the key reader; the display is restored before it reaches
    the caller.
    """

    pass
