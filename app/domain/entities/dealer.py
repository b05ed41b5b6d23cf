"""Dealer entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Dealer:
    """Dealer entity.

    ``id`` is None until the entity store assigns one on first save.
    """

    id: Optional[int] = None
    name: Optional[str] = None
