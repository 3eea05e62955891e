# o rato entrou depois: nenhum outro modulo precisou mudar pra ele existir
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from src.domain.value_objects import Portion


@dataclass(frozen=True)
class Rat:
    """Rato sem nome e sem porção; come o que encontrar."""

    @property
    def portion(self) -> Optional[Portion]:
        return None

    def describe_eating(self) -> str:
        return "The rat eats whatever it can find."
