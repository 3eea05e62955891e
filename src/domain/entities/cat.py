"""
Gato do exemplo de alimentação.

Este módulo define a entidade imutável `Cat`, que implementa a capacidade
`IEater`: sabe descrever como come a partir do próprio nome e da porção
recebida. O Feeder consome o gato apenas por essa capacidade, sem saber que
se trata de um gato.

Princípios:
- **Imutabilidade**: o dataclass é `frozen=True`; a entidade é construída
  uma vez e nunca alterada.
- **Validação na construção**: nome vazio ou porção inválida levantam
  `ValueError` no `__post_init__`.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.value_objects import Portion


@dataclass(frozen=True)
class Cat:
    """
    Entidade que representa um gato com a sua porção diária.

    Attributes:
        name: Nome do gato (não pode ser vazio).
        portion: Porção que o gato recebe; pertence exclusivamente a ele.
    """
    name: str
    portion: Portion

    def __post_init__(self) -> None:
        """
        Regras de consistência de dados:
        - name precisa ser texto não vazio
        - portion precisa ser um Portion
        """
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Nome do gato não pode estar vazio.")
        if not isinstance(self.portion, Portion):
            raise ValueError(f"Porção do gato inválida: {self.portion!r}")

    def describe_eating(self) -> str:
        """
        Descreve a refeição do gato.

        Returns:
            "{name} the cat eats {portion} portions of fish."
        """
        return f"{self.name} the cat eats {self.portion} portions of fish."
