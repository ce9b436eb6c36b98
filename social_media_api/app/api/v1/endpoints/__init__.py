"""
Endpoint subpackage for API v1.

``accounts`` covers registration, login and an account's messages;
``messages`` covers message CRUD.  Negative outcomes are answered with
an empty body and the status code of the operation (see each handler).
"""

from fastapi import Response


def empty_response(status_code: int) -> Response:
    """Response with the given status code and no body."""
    return Response(status_code=status_code)
