# server/main.py

import logging
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from api import users
from core.config import HOST, PORT, Settings, load_settings
from core.errors import StartupError, register_exception_handlers
from core.logging import setup_logging
from database import check_connection, create_db_engine, create_session_factory, init_db


_log = logging.getLogger("registry.startup")


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """
    Builds the application around one shared connection pool.
    Raises StartupError when configuration is missing or the database is unreachable.
    """
    if engine is None:
        settings = settings or load_settings()
        engine = create_db_engine(settings.database_url, settings.max_connections)

    check_connection(engine)
    init_db(engine)

    app = FastAPI(title="User Registry")
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(users.router)
    return app


def run():
    try:
        settings = load_settings()
        setup_logging(settings.log_level)
        app = create_app(settings)
    except StartupError as e:
        setup_logging()
        _log.error("Startup failed: %s", e)
        raise SystemExit(1)

    _log.info("Listening on %s:%s", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
