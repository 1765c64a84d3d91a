from __future__ import annotations

import copy
import logging.config

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import app_settings
from server import contracts
from server.api.temperature import router as temperature_router

logging_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": app_settings.log_level,
            "formatter": "default",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": app_settings.log_level,
    },
}


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=contracts.ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


class AppBuilder:
    def __init__(self):
        self._app = FastAPI(title="CEP Weather")
        self._api_prefix = ""
        self._log_to_file = False
        self._log_file_path = None
        self._file_log_level = None

    def set_api_prefix(self, prefix: str) -> AppBuilder:
        self._api_prefix = prefix
        return self

    def enable_file_logging(self, filename: str, log_level: str) -> AppBuilder:
        self._log_to_file = True
        self._log_file_path = filename
        self._file_log_level = log_level
        return self

    def _configure_file_logging(self):
        config = copy.deepcopy(logging_config)
        config['handlers']['file'] = {
            "class": "logging.FileHandler",
            "level": self._file_log_level,
            "filename": self._log_file_path,
            "formatter": "default",
        }
        config['root']['handlers'].append('file')
        logging.config.dictConfig(config)

    def build(self) -> FastAPI:
        if self._log_to_file:
            self._configure_file_logging()
        self._app.add_exception_handler(
            StarletteHTTPException, http_error_handler
        )
        self._app.include_router(
            temperature_router, prefix=self._api_prefix, tags=['Temperature']
        )
        return self._app


def create_app() -> FastAPI:
    logging.config.dictConfig(logging_config)
    builder = AppBuilder().set_api_prefix(app_settings.api_prefix)
    if app_settings.enable_file_logging:
        builder.enable_file_logging(
            filename=app_settings.log_file_path,
            log_level=app_settings.log_level,
        )
    app = builder.build()
    return app
