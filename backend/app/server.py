"""Server Entry Point — runs the API under uvicorn on the configured host/port.

Invariants:
    - Single process; the storage handle lives for the process lifetime
    - PORT env var wins over the default 3001 (via Settings)
"""

import uvicorn

from app.config import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
