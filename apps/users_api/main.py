"""HTTP layer of the users API.

Five routes map onto the :class:`apps.users_api.UsersService` handle.  Decode
failures answer 400 with the parser message, unknown ids answer 404 with a
fixed message, and anything else is logged and answered with 500.
"""

from __future__ import annotations

import argparse
import time
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from lib.config.users_api_loader import load_service_config
from lib.contracts.user import User
from lib.telemetry.logger import configure_logging, get_logger
from lib.utils.validation import DecodeError

from apps.users_api import UsersService
from apps.users_api.store import UserNotFound


logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "User not found"
DELETED_MESSAGE = "User deleted"


def _log_access(request: Request, status: int, started: float) -> None:
    logger.info(
        "%s %s -> %d (%.1f ms)",
        request.method,
        request.url.path,
        status,
        (time.perf_counter() - started) * 1000,
    )


def create_app(service: Optional[UsersService] = None) -> FastAPI:
    """Build the FastAPI application around ``service``."""

    if service is None:
        service = UsersService()
    app = FastAPI(title="users-api")

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # the outer error middleware turns this into the 500 response
            _log_access(request, 500, started)
            raise
        _log_access(request, response.status_code, started)
        return response

    @app.exception_handler(DecodeError)
    async def decode_error(request: Request, exc: DecodeError):
        logger.debug("rejected body on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(UserNotFound)
    async def not_found(request: Request, exc: UserNotFound):
        logger.info("no user with id=%r", exc.user_id)
        return JSONResponse(status_code=404, content={"message": NOT_FOUND_MESSAGE})

    @app.exception_handler(Exception)
    async def unhandled(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    @app.get("/users")
    def list_users() -> List[User]:
        """Return every user in collection order."""

        return service.list_users()

    @app.get("/users/{user_id}")
    def get_user(user_id: str) -> User:
        return service.get_user(user_id)

    @app.post("/users", status_code=201)
    async def create_user(request: Request) -> User:
        """Append the decoded body to the collection."""

        return service.create_user(await request.body())

    @app.put("/users/{user_id}")
    async def update_user(user_id: str, request: Request) -> User:
        return service.update_user(user_id, await request.body())

    @app.delete("/users/{user_id}")
    def delete_user(user_id: str):
        service.delete_user(user_id)
        return {"message": DELETED_MESSAGE}

    return app


service = UsersService()
app = create_app(service)


def run(argv: Optional[List[str]] = None) -> None:
    """Load configuration and serve the API with uvicorn."""

    parser = argparse.ArgumentParser(prog="users-api", description="Serve the users API.")
    parser.add_argument("--config", help="path to users_api.yaml (must exist when given)")
    args = parser.parse_args(argv)

    if args.config:
        svc = UsersService(config=load_service_config(args.config))
    else:
        svc = UsersService()
    configure_logging(svc.config.log_level)
    logger.info("serving users API on %s:%d", svc.config.host, svc.config.port)
    uvicorn.run(
        create_app(svc),
        host=svc.config.host,
        port=svc.config.port,
        log_level=svc.config.log_level.lower(),
    )
