"""
Process entry point: `dogs-api` console script or `python -m dogs_api.server`.
"""
import logging

import uvicorn

from dogs_api.core.config import Settings
from dogs_api.main import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = Settings()
    app = create_app(settings)
    logger.info("Server ready at: http://localhost:%s", settings.port)
    # log_config=None keeps the handler installed by create_app.
    uvicorn.run(app, host=settings.HOST, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
