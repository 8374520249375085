import sys

import uvicorn
from loguru import logger

from strings_server.app import create_app
from strings_server.config import LISTEN_PORT, settings


def main() -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL)

    app = create_app()
    logger.info(f"Starting on {settings.HOST}:{LISTEN_PORT}")
    try:
        uvicorn.run(
            app,
            host=settings.HOST,
            port=LISTEN_PORT,
            log_level=settings.LOG_LEVEL.lower(),
        )
    except SystemExit as e:
        # uvicorn exits with 1 when it cannot bind the listening socket
        if e.code:
            logger.error(f"Could not serve on {settings.HOST}:{LISTEN_PORT}, exiting")
        raise


if __name__ == "__main__":
    main()
