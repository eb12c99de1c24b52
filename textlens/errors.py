"""Failure taxonomy for the analysis pipeline.

Every error carries a ``user_message`` that the shell can show as-is.
TransportError and ResponseFormatError show the same message but stay
distinct types so logs can tell them apart.
"""

RETRY_MESSAGE = "Failed to get a valid response from the AI. Please try again."
UNKNOWN_MESSAGE = "An unknown error occurred."


class AnalysisError(Exception):
    user_message = UNKNOWN_MESSAGE


class ConfigurationError(AnalysisError):
    """Service credential missing. Fatal at startup."""

    user_message = "The AI service is not configured."


class InputError(AnalysisError):
    user_message = "Please enter some text to analyze."


class TransportError(AnalysisError):
    user_message = RETRY_MESSAGE


class ResponseFormatError(AnalysisError):
    user_message = RETRY_MESSAGE


class AnalysisInProgressError(AnalysisError):
    user_message = "An analysis is already running."


def user_message(exc: BaseException) -> str:
    """Convert any failure into the single string shown to the user."""
    if isinstance(exc, AnalysisError):
        return exc.user_message
    return UNKNOWN_MESSAGE
