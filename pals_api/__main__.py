"""
Serve the API with uvicorn.

Uso:
  python -m pals_api            # HOST/PORT from the environment (default 127.0.0.1:3001)
"""
from __future__ import annotations

import uvicorn

from pals_api.app import create_app
from pals_api.core.config import get_settings
from pals_api.core.log import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
