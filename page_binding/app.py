"""
page_binding — app FastAPI de démonstration (source mock).
Démarrer : uvicorn page_binding.app:app --reload --port 8002
"""
import logging
from typing import Optional

from fastapi import FastAPI

from . import config
from .router import create_router
from .sources import StaticDataSource

log = logging.getLogger(__name__)


def create_app(source: Optional[StaticDataSource] = None) -> FastAPI:
    logging.basicConfig(level=config.log_level(), format="%(asctime)s %(levelname)s — %(message)s")

    app = FastAPI(title="page_binding — Data binding", version="0.1.0", docs_url="/docs")
    app.include_router(create_router(source))
    log.info("Router page_binding monté (%s)", "source fournie" if source else "source mock")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
