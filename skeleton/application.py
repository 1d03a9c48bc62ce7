"""The application object: configuration, logger, database and web app."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, TypeVar

from flask import Flask, Response, request
from pydantic import BaseModel
from sqlalchemy.engine import Engine

from skeleton.config import Config, load_config
from skeleton.database import new_database
from skeleton.logger import new_logger

CORS_ALLOW_ORIGIN = "*"
CORS_ALLOW_METHODS = ("GET", "POST", "PUT", "HEAD")

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class Application:
    """Everything a request handler needs."""

    config: Config
    log: logging.Logger
    db: Optional[Engine]
    app: Flask

    def validate(self, model: type[ModelT], data: Any) -> ModelT:
        """Build ``model`` from ``data``; raise pydantic's ValidationError when it does not fit."""
        return model.model_validate(data)


def new_web_app(config: Config, logger: logging.Logger) -> Flask:
    """Create the web app with CORS open to every origin for GET, POST, PUT and HEAD."""
    web = Flask(__name__)

    @web.before_request
    def _preflight() -> Optional[Response]:
        if request.method != "OPTIONS" or not request.headers.get("Origin"):
            return None
        response = web.make_response(("", 204))
        response.headers.add("Vary", "Origin")
        response.headers.add("Vary", "Access-Control-Request-Method")
        response.headers.add("Vary", "Access-Control-Request-Headers")
        response.headers["Access-Control-Allow-Origin"] = CORS_ALLOW_ORIGIN
        response.headers["Access-Control-Allow-Methods"] = ",".join(CORS_ALLOW_METHODS)
        requested = request.headers.get("Access-Control-Request-Headers")
        if requested:
            response.headers["Access-Control-Allow-Headers"] = requested
        return response

    @web.after_request
    def _cors(response: Response) -> Response:
        if "Access-Control-Allow-Methods" in response.headers:
            return response
        response.headers.add("Vary", "Origin")
        if request.headers.get("Origin"):
            response.headers["Access-Control-Allow-Origin"] = CORS_ALLOW_ORIGIN
        return response

    return web


def new_application(environ: Optional[Mapping[str, str]] = None) -> Application:
    """Load configuration and build the logger, database and web app from it."""
    config = load_config(environ=environ)
    logger = new_logger(config)
    db = new_database(config, logger)
    web = new_web_app(config, logger)
    return Application(config=config, log=logger, db=db, app=web)