"""Response error extraction for load test observability.

Parses Zen Cafe API error responses into human-readable messages:

- Field errors (400): {"error": {"field": ["msg", ...]}}
- Other domain errors (404/500): {"error": "msg"}
- Auth errors (401/403): {"detail": "msg"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Return a compact error string suitable for Locust failure messages."""
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if not isinstance(body, dict):
        return str(body)[:300]

    if "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            return " | ".join(
                f"{field}: {'; '.join(messages) if isinstance(messages, list) else messages}"
                for field, messages in error.items()
            )
        return str(error)

    if "detail" in body:
        return str(body["detail"])

    return str(body)[:300]
