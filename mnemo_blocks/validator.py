"""
Validateur d'arbre de blocs — entrée brute (JSON client) → arbre normalisé.

    validate(raw)       → List[DroppedItem] ou BlockValidationError
    dump_tree(items)    → List[dict] (noms JSON, champs absents omis)
    walk_blocks(items)  → parcours en profondeur
    duplicate_ids(items)→ ids présents plusieurs fois (diagnostic)
"""
import logging
from collections import Counter
from typing import Any, Iterator, List, Optional

from pydantic import TypeAdapter, ValidationError

from . import config
from .blocks import BlockUnion, BLOCK_TYPES, DroppedItem
from .core.errors import BlockValidationError

log = logging.getLogger(__name__)

_TREE = TypeAdapter(List[BlockUnion])

# pydantic-core coupe la récursion vers 250 niveaux (erreur "cyclic reference") :
# aucune limite configurée ne dépasse ce plafond.
DEPTH_CEILING = 128


def _tree_depth(raw: list) -> int:
    """Profondeur max de `children` (itératif : pas de récursion Python sur l'entrée brute)."""
    depth = 0
    stack = [(node, 1) for node in raw]
    while stack:
        node, level = stack.pop()
        depth = max(depth, level)
        if isinstance(node, dict) and isinstance(node.get("children"), list):
            stack.extend((child, level + 1) for child in node["children"])
    return depth


def validate(raw: Any, max_depth: Optional[int] = None) -> List[DroppedItem]:
    """
    Valide une liste de blocs (récursivement via `children`).

    Toutes les violations de l'arbre sont collectées puis levées en une seule
    BlockValidationError. Une entrée qui n'est pas une liste est rejetée
    immédiatement, sans rapport partiel.
    """
    if not isinstance(raw, list):
        raise BlockValidationError.shape(
            f"expected a list of blocks, got {type(raw).__name__}"
        )

    limit = config.MAX_BLOCK_DEPTH if max_depth is None else max_depth
    if limit <= 0 or limit > DEPTH_CEILING:
        limit = DEPTH_CEILING
    depth = _tree_depth(raw)
    if depth > limit:
        raise BlockValidationError.shape(
            f"block tree is {depth} levels deep, maximum is {limit}"
        )

    try:
        return _TREE.validate_python(raw)
    except ValidationError as e:
        err = BlockValidationError.from_pydantic(e, BLOCK_TYPES)
        log.info("Arbre de blocs refusé — %d violation(s)", len(err.issues))
        raise err from None


def dump_tree(items: List[DroppedItem]) -> List[dict]:
    """Sérialise un arbre normalisé en JSON prêt à persister (clés camelCase)."""
    return [item.model_dump(mode="json", by_alias=True, exclude_none=True) for item in items]


def walk_blocks(items: Optional[List[DroppedItem]]) -> Iterator[DroppedItem]:
    """Parcourt tous les nœuds, parent avant enfants, dans l'ordre."""
    stack = list(reversed(items or []))
    while stack:
        item = stack.pop()
        yield item
        if item.children:
            stack.extend(reversed(item.children))


def duplicate_ids(items: List[DroppedItem]) -> List[str]:
    """Ids présents plus d'une fois dans l'arbre (ordre de première apparition)."""
    counts = Counter(item.id for item in walk_blocks(items))
    return [block_id for block_id, n in counts.items() if n > 1]
