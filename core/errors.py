"""
Error taxonomy for the sale options engine.

InvalidInput and RenderFailure propagate to the caller.
DeliveryFailure never leaves the delivery adapters.
"""

from typing import List, Optional


class InvalidInput(ValueError):
    """Raised when property attributes or comparison inputs are out of range."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Invalid input: {'; '.join(errors)}")


class RenderFailure(Exception):
    """Raised when the comparison report cannot be assembled."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)


class DeliveryFailure(Exception):
    """Transport or non-success response from the messaging gateway."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_text: str = "",
    ):
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(message)
