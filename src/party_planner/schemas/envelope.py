"""Response envelope shared by every endpoint."""

from pydantic import BaseModel


class Envelope[T](BaseModel):
    """Successful response wrapper: ``{"success": true, "response": ...}``.

    Failures use the same shape with ``success`` false, a message in
    ``response`` and an ``error`` code (see core.exceptions).
    """

    success: bool = True
    response: T


def ok[T](data: T) -> Envelope[T]:
    """Wrap data in a successful envelope."""
    return Envelope(response=data)
