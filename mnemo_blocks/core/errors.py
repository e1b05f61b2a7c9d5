"""
Erreurs du validateur de blocs.

BlockValidationError agrège toutes les violations trouvées pendant le
parcours (récursif) de l'arbre : un seul message, une seule exception.
"""
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

_PREFIX = "block validation failed"


def format_loc(loc: Sequence[Any], tags: frozenset = frozenset()) -> str:
    """
    (0, "postAccordion", "children", 1, "p", "content") → "[0].children[1].content"

    Les tags de l'union discriminée (insérés par pydantic après un index)
    sont retirés du chemin.
    """
    out = ""
    prev_is_index = False
    for part in loc:
        if isinstance(part, int):
            out += f"[{part}]"
            prev_is_index = True
            continue
        if prev_is_index and part in tags:
            prev_is_index = False
            continue
        out += f".{part}" if out else str(part)
        prev_is_index = False
    return out or "<root>"


class BlockValidationError(ValueError):
    """Arbre de blocs invalide — message = liste concaténée des violations."""

    def __init__(self, issues: List[Dict[str, str]]):
        self.issues = issues
        details = "; ".join(
            f"{i['loc']}: {i['msg']}" if i.get("loc") else i["msg"]
            for i in issues
        )
        super().__init__(f"{_PREFIX}: {details}")

    @property
    def message(self) -> str:
        return str(self)

    @classmethod
    def shape(cls, msg: str) -> "BlockValidationError":
        """Erreur de forme (entrée non-liste, profondeur) — pas de rapport partiel."""
        return cls([{"loc": "", "msg": msg, "type": "shape"}])

    @classmethod
    def from_pydantic(cls, exc: ValidationError, tags: Optional[frozenset] = None) -> "BlockValidationError":
        issues = [
            {
                "loc":  format_loc(err["loc"], tags or frozenset()),
                "msg":  err["msg"],
                "type": err["type"],
            }
            for err in exc.errors()
        ]
        return cls(issues)


class ChunkPayloadError(ValueError):
    """Payload de data chunk refusé à l'écriture (texte vide, URL invalide, éditeur manquant…)."""
