from __future__ import annotations
from dataclasses import dataclass

from src.domain.value_objects import Portion


@dataclass(frozen=True)
class Dog:
    """
    Representa um cachorro com nome e porção.
    - Imutável (dataclass frozen)
    - Valida nome e porção no __post_init__
    """
    name: str
    portion: Portion

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Nome do cachorro não pode estar vazio.")
        if not isinstance(self.portion, Portion):
            raise ValueError(f"Porção do cachorro inválida: {self.portion!r}")

    def describe_eating(self) -> str:
        """Linha com nome e tamanho da porção."""
        return f"{self.name} the dog eats {self.portion} portions of meat."
