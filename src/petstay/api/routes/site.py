"""Static site endpoint.

Serves the website's files for every path the API routes do not claim.
Only GET and HEAD are served; HEAD returns the same headers with no body.
Must be registered after all API routers.
"""

from fastapi import APIRouter, Depends, Request, Response

from petstay.api.dependencies import get_static_responder
from petstay.models.errors import ErrorCode, ReservationSiteError
from petstay.services.static_files import SERVED_METHODS, StaticResponder

router = APIRouter(tags=["site"])

ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def request_path(request: Request) -> str:
    """Path as sent by the client, before the server decoded it."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.decode("latin-1")
    return request.scope["path"]


@router.api_route("/{path:path}", methods=ROUTED_METHODS, include_in_schema=False)
async def serve_site_file(
    request: Request,
    responder: StaticResponder = Depends(get_static_responder),
) -> Response:
    if request.method not in SERVED_METHODS:
        raise ReservationSiteError(ErrorCode.METHOD_NOT_ALLOWED)

    static_file = await responder.read(request_path(request))
    headers = {
        "content-type": static_file.content_type,
        "content-length": str(len(static_file.content)),
    }
    body = b"" if request.method == "HEAD" else static_file.content
    return Response(content=body, headers=headers)
