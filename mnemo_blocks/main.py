"""
MNEMO blocks — FastAPI app
Démarrer : uvicorn mnemo_blocks.main:app --reload --port 8001
"""
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__, config
from .router import router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="MNEMO — Page blocks", version=__version__, docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=config.CORS_ORIGINS, allow_methods=["*"], allow_headers=["*"])

app.include_router(router)


@app.on_event("startup")
def startup():
    from .database import init_db
    init_db()
    log.info("DB initialisée (SQLite : %s)", config.DB_PATH)


@app.get("/health")
def health():
    return {"status": "ok", "service": "mnemo_blocks", "version": __version__}
