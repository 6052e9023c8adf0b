"""Run the API with uvicorn: ``python -m travestore``."""

import uvicorn

from travestore.config import settings
from travestore.logging import get_logger

logger = get_logger(__name__)


def main() -> None:
    logger.info("server_starting", host=settings.host, port=settings.port)
    logger.info("api_docs_available", url=f"http://localhost:{settings.port}/api-docs")
    uvicorn.run("travestore.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
