"""
Response wrapping shared by every endpoint.

Each route runs one query and answers in one of three shapes:

* ``200 {key: [rows...]}`` when the query matched something,
* ``404 {"message": ...}`` when it matched nothing,
* ``500 {"error": ...}`` when running it raised.

``respond`` implements that choice once so the handlers only name their
query, their response key and their not‑found message.
"""

import logging
from typing import Any, Callable, Dict, List

from fastapi import status
from fastapi.responses import JSONResponse

from foodie_finds_api.app.schemas.message import ErrorMessage, NotFoundMessage

logger = logging.getLogger(__name__)

# Extra OpenAPI entries for routes using ``respond``.
ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"model": NotFoundMessage},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorMessage},
}


def respond(
    fetch: Callable[[], List[Dict[str, Any]]],
    key: str,
    not_found_message: str,
) -> JSONResponse:
    """Run ``fetch`` and turn its outcome into a JSON response."""
    try:
        rows = fetch()
        if not rows:
            logger.debug("No rows for %r: %s", key, not_found_message)
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"message": not_found_message},
            )
        # JSONResponse renders eagerly; keep it inside the try.
        return JSONResponse(status_code=status.HTTP_200_OK, content={key: rows})
    except Exception as exc:
        logger.exception("Query for %r failed", key)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )
