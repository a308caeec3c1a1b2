"""
Servicios API — Process Entry Point
====================================

What:  `python -m app` (or the `servicios-api` console script) starts uvicorn
       on BACKEND_HOST:PORT.
"""

import uvicorn

from app.config import settings


def main() -> None:
    uvicorn.run(
        "app.main:app",
        host=settings.backend_host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
