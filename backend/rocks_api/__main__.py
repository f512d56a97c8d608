"""Entry point for running the Rocks API server.

Usage:
    python -m rocks_api
    PORT=8080 python -m rocks_api
    rocks-api
"""

import uvicorn

from rocks_api.config import settings


def main() -> None:
    uvicorn.run(
        "rocks_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
