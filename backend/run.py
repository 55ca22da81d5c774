"""Entry point for the Participation API.

Usage:
    python run.py

Host and port come from Settings (HOST / PORT environment variables,
defaults 0.0.0.0:4000).
"""
import uvicorn

from app.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "app.main:app", host=settings.host, port=settings.port, reload=False,
    )


if __name__ == "__main__":
    main()
