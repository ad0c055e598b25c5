import logging

import uvicorn

from video_mock.core.app_factory import create_app
from video_mock.core.config import settings
from video_mock.core.logging import configure_logging

configure_logging(settings.log)

logger = logging.getLogger(__name__)

app = create_app()


def run() -> None:
    """Serve the mock with uvicorn on the configured host and port."""

    logger.info(
        "server.starting",
        extra={
            "host": settings.app.host,
            "port": settings.app.port,
            "url": f"http://localhost:{settings.app.port}",
        },
    )
    # log_config=None keeps the handlers installed by configure_logging
    uvicorn.run(app, host=settings.app.host, port=settings.app.port, log_config=None)


if __name__ == "__main__":
    run()
