import logging

import uvicorn

from config.settings import get_service_settings
from server.app import create_app

logger = logging.getLogger(__name__)

app = create_app()


def run() -> None:
    settings = get_service_settings()
    logger.info("Starting CEP weather API on port %s", settings.port)
    logger.info("Endpoint: http://localhost:%s/{cep}", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
