"""Blocs d'action — bouton, lien."""
from typing import Literal

from ..core.schemas import ButtonData
from .base import BaseBlock


class ButtonBlock(BaseBlock):
    type: Literal["button"]
    button: ButtonData


class LinkBlock(BaseBlock):
    """content = texte du lien ; cible dans `link` (ou `button` pour l'éditeur v1)."""
    type: Literal["link"]
    content: str
