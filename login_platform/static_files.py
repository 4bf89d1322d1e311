"""
Static file lookup for the frontend.

"/" maps to the login page; any other path maps to a file under the
static directory. Paths that resolve outside that directory are treated
as missing.
"""

from pathlib import Path
from typing import Optional, Union

LOGIN_PAGE = "login.html"
INDEX_PAGE = "index.html"


def resolve_static_path(static_dir: Union[str, Path], url_path: str) -> Optional[Path]:
    """
    Map a request path to a file on disk.

    Args:
        static_dir: Root directory for static assets.
        url_path: Request path without the leading slash ("" for "/").

    Returns:
        Optional[Path]: The file to serve, or None if there is nothing to serve.
    """
    root = Path(static_dir).resolve()
    relative = url_path.lstrip("/")
    if not relative:
        relative = LOGIN_PAGE

    target = (root / relative).resolve()
    if target != root and root not in target.parents:
        return None

    if target.is_dir():
        target = target / INDEX_PAGE

    if not target.is_file():
        return None
    return target
