"""
Router FastAPI — pages + blocs + data chunks.

POST /api/page               → valide puis sauvegarde {slug, data, dataHtml?, dataSeo?}
GET  /api/page?slug=         → page sauvegardée
POST /api/blocks/validate    → {"valid": bool, "error"?, "issues"?}
GET  /api/blocks/catalog     → tags disponibles + libellés + JSON schemas
GET  /api/programmes         → liste {id, title, shortTitle}
GET  /api/data-chunk/items   → chunks traduits en blocs (bibliothèque de l'éditeur)
POST /api/data-chunk         → crée un chunk text / rich_text / image
"""
import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from .blocks import BLOCK_REGISTRY, get_semantic_label
from .core.errors import BlockValidationError, ChunkPayloadError
from .database import get_db, db_create_chunk, db_get_page, db_list_programmes
from .mapper import map_chunk_payload
from .models import DataChunkCreate, DataChunkDB, PageSaveInput
from .pages import assemble_library_items, save_page
from .validator import validate as validate_tree

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["blocks"])


# ── Pages ──────────────────────────────────────────────────────────────────────

@router.post("/page")
def page_save(req: PageSaveInput, db: Session = Depends(get_db)):
    try:
        page = save_page(db, req.slug, req.data, data_html=req.data_html, data_seo=req.data_seo)
    except BlockValidationError as e:
        raise HTTPException(422, {"error": e.message, "issues": e.issues})
    return {"message": "Page saved", "page": page.to_dict()}


@router.get("/page")
def page_get(slug: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    page = db_get_page(db, slug)
    if not page:
        raise HTTPException(404, "Page not found")
    return page.to_dict()


# ── Blocs ──────────────────────────────────────────────────────────────────────

@router.post("/blocks/validate", summary="Valide un arbre de blocs sans le sauvegarder")
def blocks_validate(data: Any = Body(...)) -> dict:
    try:
        validate_tree(data)
        return {"valid": True}
    except BlockValidationError as e:
        return {"valid": False, "error": e.message, "issues": e.issues}


@router.get("/blocks/catalog", summary="Liste les blocs disponibles et leurs schemas")
def blocks_catalog() -> dict:
    return {"blocks": [
        {
            "type":   tag,
            "label":  get_semantic_label(tag),
            "schema": cls.model_json_schema(by_alias=True),
        }
        for tag, cls in BLOCK_REGISTRY.items()
    ]}


# ── Programmes + data chunks ───────────────────────────────────────────────────

@router.get("/programmes")
def programmes_list(db: Session = Depends(get_db)):
    return {"programmes": [p.to_dict() for p in db_list_programmes(db)]}


@router.get("/data-chunk/items")
def data_chunk_items(programme_id: Optional[str] = Query(None), db: Session = Depends(get_db)):
    items = assemble_library_items(db, programme_id)
    return {"items": [i.model_dump(mode="json", by_alias=True, exclude_none=True) for i in items]}


@router.post("/data-chunk")
def data_chunk_create(req: DataChunkCreate, db: Session = Depends(get_db)):
    try:
        mapped = map_chunk_payload(req.data, req.meta_data, req.type)
    except ChunkPayloadError as e:
        raise HTTPException(400, str(e))
    chunk = db_create_chunk(db, DataChunkDB(
        programme_id=req.programme_id,
        name=req.name,
        type=req.type,
        data=mapped.model_dump(mode="json")["data"],
        meta_data=mapped.metaData.model_dump(mode="json"),
    ))
    log.info("Data chunk %s créé (%s)", chunk.id, chunk.type)
    return {"success": True, "dataChunk": chunk.to_dict()}
