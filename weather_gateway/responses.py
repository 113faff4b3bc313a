"""Response helpers shared by the gate chain and the weather handler."""

from typing import Dict, Optional

from fastapi.responses import PlainTextResponse


def error_response(
    message: str, status_code: int, headers: Optional[Dict[str, str]] = None
) -> PlainTextResponse:
    """Single-line plain text error, newline terminated."""
    response = PlainTextResponse(message + "\n", status_code=status_code, headers=headers)
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response
