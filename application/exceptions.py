"""
Application-layer exceptions.

These exceptions are raised by the core services and surface synchronously
to the immediate caller. "Nothing found" outcomes (unknown band color, no
matching exercise, no history) are never exceptions; they are returned as
``None`` or :class:`domain.models.NoSuggestion`.
"""


class InvalidInput(ValueError):
    """Malformed numeric argument passed to a calculation.

    Raised for negative weights, non-positive rep counts and similar
    arguments that no calculation can recover from.
    """

    pass
