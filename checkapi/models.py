"""
Response envelopes for the check endpoint.

These are the only objects ever serialized to the client. None of them
carries the caller-supplied domain string.
"""

from typing import Literal, Union

from pydantic import BaseModel


class AvailableEnvelope(BaseModel):
    """Domain can be registered, at the given fee tier."""
    status: Literal["success"] = "success"
    available: Literal[True] = True
    tier: str


class UnavailableEnvelope(BaseModel):
    """Domain cannot be registered; reason comes from the registry."""
    status: Literal["success"] = "success"
    available: Literal[False] = False
    reason: str


class ErrorEnvelope(BaseModel):
    status: Literal["error"] = "error"
    reason: str


OutputEnvelope = Union[AvailableEnvelope, UnavailableEnvelope, ErrorEnvelope]
