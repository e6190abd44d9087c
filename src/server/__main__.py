"""Server module entry point for running with python -m server."""

import os

import uvicorn

from carbon2html.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

if __name__ == "__main__":
    configure_logging()

    # Get configuration from environment variables
    host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info(
        "Starting carbon2html server",
        extra={
            "host": host,
            "port": port,
        },
    )

    uvicorn.run(
        "server.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,  # Keep the root logging configuration
    )
