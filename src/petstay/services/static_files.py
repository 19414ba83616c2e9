"""Static file responder for the site's HTML, CSS, JS and images.

Resolves URL paths to files under a root directory. Paths that normalize to
somewhere outside the root are rejected, so ``..`` segments and absolute
path injection (plain or percent-encoded) never escape it.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote

import anyio

from petstay.models.errors import ErrorCode, ReservationSiteError
from petstay.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"
DEFAULT_INDEX_DOCUMENT = "index.html"

# Extension -> Content-Type for the asset types the site ships
DEFAULT_CONTENT_TYPES: dict[str, str] = {
    ".css": "text/css; charset=utf-8",
    ".html": "text/html; charset=utf-8",
    ".js": "application/javascript; charset=utf-8",
    ".json": "application/json; charset=utf-8",
    ".svg": "image/svg+xml",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".ico": "image/x-icon",
    ".webp": "image/webp",
    ".txt": "text/plain; charset=utf-8",
}

SERVED_METHODS = frozenset({"GET", "HEAD"})


@dataclass(frozen=True)
class StaticFile:
    """A file ready to be sent to the client."""

    path: Path
    content: bytes
    content_type: str


class StaticResponder:
    """Serves files from a single root directory."""

    def __init__(
        self,
        root: Path | str,
        *,
        index_document: str = DEFAULT_INDEX_DOCUMENT,
        content_types: dict[str, str] | None = None,
    ):
        self.root = Path(root).resolve()
        self.index_document = index_document
        self.content_types = {
            ext.lower(): value
            for ext, value in (content_types or DEFAULT_CONTENT_TYPES).items()
        }

    def content_type_for(self, path: Path) -> str:
        return self.content_types.get(path.suffix.lower(), DEFAULT_CONTENT_TYPE)

    def resolve(self, url_path: str) -> Path:
        """Map a URL path to a file path under the root.

        Args:
            url_path: Request path, possibly percent-encoded

        Returns:
            Absolute, normalized path inside the root directory

        Raises:
            ReservationSiteError: INVALID_PATH if the path escapes the root
                or contains a NUL byte.
        """
        decoded = unquote(url_path or "/")
        if "\x00" in decoded:
            raise ReservationSiteError(ErrorCode.INVALID_PATH)

        if decoded in ("", "/"):
            decoded = f"/{self.index_document}"

        root = str(self.root)
        full_path = os.path.normpath(os.path.join(root, decoded.lstrip("/")))
        if os.path.commonpath([root, full_path]) != root:
            logger.warning("Rejected path outside static root: %r", url_path)
            raise ReservationSiteError(ErrorCode.INVALID_PATH)

        return Path(full_path)

    async def read(self, url_path: str) -> StaticFile:
        """Resolve and read a file without blocking the event loop.

        Raises:
            ReservationSiteError: INVALID_PATH, NOT_FOUND if the file does
                not exist, READ_ERROR for any other read failure.
        """
        path = self.resolve(url_path)
        try:
            content = await anyio.Path(path).read_bytes()
        except (FileNotFoundError, NotADirectoryError) as e:
            raise ReservationSiteError(ErrorCode.NOT_FOUND) from e
        except OSError as e:
            logger.error("Could not read %s: %s", path, e)
            raise ReservationSiteError(ErrorCode.READ_ERROR) from e

        return StaticFile(path=path, content=content, content_type=self.content_type_for(path))
