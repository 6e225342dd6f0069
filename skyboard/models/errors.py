"""Errors raised while decoding request payloads."""

from typing import Optional


class PayloadError(ValueError):
    """
    A request body could not be turned into a model.

    Raised before anything reaches the state store, so a rejected
    payload never leaves partial state behind.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        result = {'error': self.message}
        if self.field:
            result['field'] = self.field
        return result
