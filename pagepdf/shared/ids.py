"""Identifier helpers."""

import uuid


def generate_request_id() -> str:
    """Generate a short request identifier."""
    return f"req_{uuid.uuid4().hex[:16]}"
