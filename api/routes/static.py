"""Static assets and the fallback for everything no other route matched"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import FileResponse
import logging
from pathlib import Path

from api.dependencies import get_public_dir
from app.exceptions import NotFoundError

router = APIRouter(tags=["Static"])
logger = logging.getLogger("foodorder.api.static")


def resolve_asset(public_dir: Path, path: str) -> Path:
    """
    Map a URL path onto a file inside public_dir.

    Raises:
        NotFoundError: If the file does not exist, lies outside public_dir or
            the path is not a usable file name (NUL bytes, over-long names)
    """
    try:
        root = public_dir.resolve()
        candidate = (root / path.lstrip("/")).resolve()
        if candidate.is_dir():
            candidate = candidate / "index.html"
        if not candidate.is_relative_to(root) or not candidate.is_file():
            raise NotFoundError()
    except (OSError, ValueError) as e:
        logger.debug("Unusable asset path %r: %s", path[:200], e)
        raise NotFoundError() from e
    return candidate


@router.api_route(
    "/{path:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
def serve_static(path: str, request: Request, public_dir: Path = Depends(get_public_dir)):
    """
    Serve a file from the public directory.

    Registered last: anything reaching it matched no API route. OPTIONS is
    answered with an empty 200, other non-GET methods are a 404.
    """
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK)
    if request.method not in ("GET", "HEAD"):
        raise NotFoundError()
    return FileResponse(resolve_asset(public_dir, path))
