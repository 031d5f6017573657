"""
HTTP application for the GovInfo API.

Routes get the config, logger and database engine from `app.state`;
nothing is read from module globals.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from . import __version__
from .config import Config
from .database import check_connection


def create_app(config: Config, logger: logging.Logger, engine: Optional[Engine] = None) -> FastAPI:
    app = FastAPI(title="GovInfo API", version=__version__)
    app.state.config = config
    app.state.logger = logger
    app.state.engine = engine

    app.add_api_route("/health", health, methods=["GET"], response_class=PlainTextResponse)
    app.add_api_route("/ready", ready, methods=["GET"])
    return app


def health(request: Request):
    """Liveness check for monitoring. Always 200, regardless of config."""
    request.app.state.logger.info("Health check called")
    return PlainTextResponse("OK")


def ready(request: Request):
    """
    Readiness check: probes the database when one is configured.

    503 when the probe fails so load balancers stop routing here.
    """
    logger = request.app.state.logger
    engine = request.app.state.engine
    if engine is None:
        if request.app.state.config.database_configured:
            # DATABASE_URL is set but no engine could be built from it
            return JSONResponse(
                {"status": "unavailable", "database": "error"},
                status_code=503,
            )
        return JSONResponse({"status": "ok", "database": "not_configured"})

    try:
        check_connection(engine)
    except SQLAlchemyError as e:
        logger.warning(f"Readiness check failed: {e}")
        return JSONResponse(
            {"status": "unavailable", "database": "error"},
            status_code=503,
        )

    return JSONResponse({"status": "ok", "database": "ok"})
