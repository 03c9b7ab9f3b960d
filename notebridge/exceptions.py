"""
Exceptions raised by notebridge.

Analysis and Markdown parsing never raise; only payloads that cannot be read
as a workspace document at all end up here.
"""


class NotebridgeError(Exception):
    """Base class for notebridge errors."""


class InvalidDocumentError(NotebridgeError, ValueError):
    """A document payload has the wrong shape for its model."""

    def __init__(self, model_name: str, details: str):
        self.model_name = model_name
        self.details = details
        super().__init__(f"Invalid {model_name} payload: {details}")
