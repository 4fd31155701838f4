"""Shared types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestContext:
    """Per-request values attached to log records."""
    request_id: str
    actor: str = "system"
