"""SQLite — init + session + CRUD helpers"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from . import config
from .models import Base, DataChunkDB, PageDB, ProgrammeDB

log = logging.getLogger(__name__)

Path(config.DB_PATH).parent.mkdir(parents=True, exist_ok=True)

ENGINE       = create_engine(f"sqlite:///{config.DB_PATH}", connect_args={"check_same_thread": False})
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=ENGINE)


_PROGRAMME_DEFAULTS = [
    {"title": "Abdul Latif Jameel Poverty Action Lab",              "short_title": "J-PAL"},
    {"title": "MIT Abdul Latif Jameel Water and Food Systems Lab",  "short_title": "MIT J-WAFS"},
    {"title": "MIT Jameel World Education Lab",                     "short_title": "J-WEL"},
    {"title": "MIT Jameel Clinic",                                  "short_title": "MIT Jameel Clinic"},
    {"title": "Jameel Institute",                                   "short_title": "Jameel Institute"},
    {"title": "Jameel Observatory for Food Security Early Action",  "short_title": "Jameel Observatory"},
    {"title": "Jameel Arts & Health Lab",                           "short_title": "Jameel Arts & Health Lab"},
    {"title": "J-PAL Air and Water Labs",                           "short_title": "J-PAL AWL"},
    {"title": "AUC Jameel Centre",                                  "short_title": "Jameel Centre"},
    {"title": "Ankur",                                              "short_title": "Ankur"},
]


def init_db(engine: Optional[Engine] = None):
    """Crée les tables et insère les programmes par défaut si la table est vide."""
    engine = engine or ENGINE
    Base.metadata.create_all(bind=engine)
    with sessionmaker(bind=engine)() as db:
        if db.query(ProgrammeDB).count() == 0:
            for p in _PROGRAMME_DEFAULTS:
                db.add(ProgrammeDB(**p))
            db.commit()
            log.info("Programmes initialisés (%d)", len(_PROGRAMME_DEFAULTS))


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ── Programmes ──
def db_list_programmes(db: Session) -> List[ProgrammeDB]:
    return db.query(ProgrammeDB).order_by(ProgrammeDB.title).all()


# ── Data chunks ──
def db_create_chunk(db: Session, obj: DataChunkDB) -> DataChunkDB:
    db.add(obj); db.commit(); db.refresh(obj); return obj

def db_list_chunks(db: Session, programme_id: Optional[str] = None) -> List[DataChunkDB]:
    q = db.query(DataChunkDB)
    if programme_id: q = q.filter_by(programme_id=programme_id)
    return q.order_by(DataChunkDB.id).all()


# ── Pages ──
def db_get_page(db: Session, slug: str) -> Optional[PageDB]:
    return db.query(PageDB).filter_by(slug=slug).first()

def db_upsert_page(db: Session, slug: str, data: List[Dict[str, Any]],
                   data_html: Optional[str] = None, data_seo: Optional[dict] = None) -> PageDB:
    page = db_get_page(db, slug)
    if page:
        page.data, page.data_html, page.data_seo = data, data_html, data_seo
    else:
        page = PageDB(slug=slug, data=data, data_html=data_html, data_seo=data_seo)
        db.add(page)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(page)
    return page
