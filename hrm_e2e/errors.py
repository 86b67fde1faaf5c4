"""Exception types raised by the E2E toolkit."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a domain object is constructed from invalid input."""


class UiActionError(RuntimeError):
    """
    Raised when the application rejects a UI action.

    The OrangeHRM UI reports failed saves with an error toast; the text of
    that toast is carried in the message.
    """


class StateFileError(RuntimeError):
    """Raised when the scenario side-file cannot be read."""
