#!/usr/bin/env python3
"""Startup script for the Welcome Service.

Usage:
    welcome-service
    PORT=8080 python -m app.run
"""

import uvicorn

from app.core.config import get_settings


def main() -> None:
    settings = get_settings()

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.effective_log_level.lower(),
        # app.core.logging owns the root logger; keep uvicorn from installing its own config
        log_config=None,
    )


if __name__ == "__main__":
    main()
