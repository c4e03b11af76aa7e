import uvicorn

from app.api.app_factory import create_app
from app.config.settings import Settings
from app.database.connection import close_pool, ensure_schema, init_pool
from app.logging.logger import Log


def main() -> None:
    """Entry point: initialize pool -> ensure schema -> build app -> serve HTTP."""
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)

    try:
        ensure_schema()
        app = create_app(settings)
        Log.info(f"Server starting on {settings.host}:{settings.port}", app_env=settings.app_env)
        uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    finally:
        close_pool()


if __name__ == "__main__":
    main()
