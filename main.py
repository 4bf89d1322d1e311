"""
Main API module for Login Platform.

Responsibilities:
    - Expose the login endpoint (POST /api/login)
    - Expose a liveness probe (/health, any method)
    - Serve the static login page and its assets

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - In-memory CredentialStore by default; any BaseCredentialStore can be injected
      through a custom AuthService.
    - Routes depend on the BaseAuthService contract via get_auth_service().

Status mapping for /api/login:
    200 success body, 401 failure body, 400 undecodable body,
    405 non-POST method, 500 empty username/password.
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse, Response

from login_platform.auth.base import BaseAuthService
from login_platform.auth.dependencies import get_auth_service
from login_platform.auth.errors import ValidationError
from login_platform.auth.schemas import LoginRequest
from login_platform.auth.service import AuthService
from login_platform.config import Settings, load_settings
from login_platform.static_files import resolve_static_path
from login_platform.storage.credential_store import CredentialStore

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(
    settings: Optional[Settings] = None,
    auth_service: Optional[BaseAuthService] = None,
) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        settings (Optional[Settings]): Runtime settings; read from the environment when omitted.
        auth_service (Optional[BaseAuthService]): Service to wire in; defaults to an
            AuthService over the demo credential store.

    Returns:
        FastAPI: A fully configured application instance with its own
                 store and service.
    """
    settings = settings or load_settings()

    app = FastAPI(
        title="Login Platform",
        description="Minimal login demo with an in-memory user table and placeholder tokens",
        docs_url="/docs",
    )
    log = logging.getLogger("login")

    # basic console logging (optional)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)

    # ----------------------------------------------------------------
    # Per-app instances (isolated for tests, swappable for production)
    # ----------------------------------------------------------------
    if auth_service is None:
        auth_service = AuthService(store=CredentialStore.default())
    app.state.settings = settings
    app.state.auth_service = auth_service

    log.info("Login server address: %s", settings.server_address)
    log.info("Serving static files from: %s", settings.STATIC_DIR)

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.api_route("/health", methods=ALL_METHODS)
    def health() -> PlainTextResponse:
        return PlainTextResponse("ok")

    @app.api_route("/api/login", methods=ALL_METHODS)
    async def login(
        request: Request,
        service: BaseAuthService = Depends(get_auth_service),
    ) -> Response:
        """
        Authenticate a username/password pair.

        Notes:
            - Registered for every method so non-POST requests get 405 here
              instead of falling through to the static catch-all.
            - The body is decoded by hand so method checks come first.
        """
        if request.method != "POST":
            return PlainTextResponse("Method not allowed", status_code=405)

        raw = await request.body()
        try:
            login_req = LoginRequest.from_body(raw)
        except ValueError:
            return PlainTextResponse("Invalid request body", status_code=400)

        try:
            result = service.authenticate(login_req.username, login_req.password)
        except ValidationError as ve:
            log.warning("Rejected login request: %s", ve)
            return PlainTextResponse("Internal server error", status_code=500)

        if result.success:
            log.info("Login succeeded for %s", login_req.username)
            status_code = 200
        else:
            log.warning("Login failed for %s", login_req.username)
            status_code = 401
        return JSONResponse(result.model_dump(), status_code=status_code)

    @app.get("/{path:path}")
    def serve_static(path: str) -> FileResponse:
        """Serve the login page at "/" and other assets from STATIC_DIR."""
        target = resolve_static_path(settings.STATIC_DIR, path)
        if target is None:
            raise HTTPException(status_code=404, detail="File not found")
        return FileResponse(target)

    return app


# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()


if __name__ == "__main__":
    import uvicorn

    cfg = app.state.settings
    uvicorn.run(app, host=cfg.SERVER_HOST, port=cfg.SERVER_PORT)
