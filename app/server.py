"""Run the API with uvicorn."""
from __future__ import annotations

import uvicorn

from app.config import get_settings
from app.main import create_app


def run() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
