import logging

import uvicorn
from fastapi import FastAPI

from brick.config import Settings, settings
from brick.web.routes import router


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    logging.basicConfig(level=app_settings.log_level.upper())

    app = FastAPI(title="Brick API")

    app.include_router(router)

    return app


app = create_app()


def main():
    uvicorn.run(
        "brick.cmd.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
