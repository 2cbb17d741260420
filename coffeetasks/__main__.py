"""Serve the API with uvicorn: ``python -m coffeetasks``."""

import uvicorn

from coffeetasks.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "coffeetasks.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
