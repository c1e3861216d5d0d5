"""Request Body Reading — lazy JSON parsing so id checks run before body checks.

Invariants:
    - Body is parsed only when the request declares a JSON content type;
      otherwise it counts as absent (None)
    - Empty body -> None
    - Malformed JSON -> InputValidationError (400), never a 500

Design Decisions:
    - Parsed inside the handler instead of a FastAPI Body(...) parameter: the
      framework would parse (and reject) the body before the path id is checked
"""

import json

from fastapi import Request

from jukebox.core.errors import InputValidationError


async def read_json_body(request: Request) -> object | None:
    content_type = request.headers.get("content-type", "")
    if "json" not in content_type.lower():
        return None
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        raise InputValidationError(
            "Request body must be valid JSON", field="body",
        ) from e
