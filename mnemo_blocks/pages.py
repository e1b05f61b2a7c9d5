"""
Sauvegarde de page + assemblage des blocs depuis les data chunks.

save_page : validation stricte AVANT toute écriture — un arbre refusé ne
laisse aucune trace en base.
"""
import logging
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from .blocks import DroppedItem
from .database import db_list_chunks, db_list_programmes, db_upsert_page
from .mapper import map_chunks_to_items, programme_lookup
from .models import PageDB
from .validator import dump_tree, duplicate_ids, validate

log = logging.getLogger(__name__)


def save_page(db: Session, slug: str, raw: Any,
              data_html: Optional[str] = None, data_seo: Optional[dict] = None) -> PageDB:
    """Valide `raw` puis persiste l'arbre normalisé sous `slug`. Lève BlockValidationError."""
    items = validate(raw)

    dupes = duplicate_ids(items)
    if dupes:
        log.warning("Page %s : ids de blocs dupliqués %s", slug, dupes)

    page = db_upsert_page(db, slug, dump_tree(items), data_html=data_html, data_seo=data_seo)
    log.info("Page %s sauvegardée — %d bloc(s) racine", slug, len(items))
    return page


def assemble_library_items(db: Session, programme_id: Optional[str] = None) -> List[DroppedItem]:
    """Tous les chunks (éventuellement d'un programme) traduits en blocs."""
    programmes = programme_lookup(p.to_dict() for p in db_list_programmes(db))
    chunks = [c.to_dict() for c in db_list_chunks(db, programme_id)]
    return map_chunks_to_items(chunks, programmes)
