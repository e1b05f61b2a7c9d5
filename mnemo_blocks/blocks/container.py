"""Blocs conteneurs — liste, accordéon. Les enfants sont dans `children`."""
from typing import Literal

from .base import BaseBlock


class ListBlock(BaseBlock):
    type: Literal["ul"]


class PostAccordionBlock(BaseBlock):
    """content = titre de l'accordéon."""
    type: Literal["postAccordion"]
    content: str
