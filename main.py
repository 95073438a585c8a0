# main.py

from uvicorn import run

from inventory_api.configs import settings


def main() -> None:
    """Serve the inventory API with the host, port and reload flag from settings."""
    run(
        "inventory_api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
        loop="uvloop",
        http="httptools",
    )


if __name__ == "__main__":
    main()
