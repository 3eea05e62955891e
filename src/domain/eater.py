# define o que um bicho precisa saber fazer para ser alimentado,
# mas nao qual bicho ele é
# src/domain/eater.py
from __future__ import annotations
from typing import Protocol, Optional

from src.domain.value_objects import Portion


class IEater(Protocol):
    """Capacidade de descrever como se alimenta.

    Este protocolo define **o que** uma entidade precisa oferecer ao Feeder,
    sem impor o tipo concreto (Cat, Dog, Rat, ...). Novos bichos entram
    implementando este contrato, sem alterar quem os consome.
    """

    @property
    def portion(self) -> Optional[Portion]:
        """Porção atribuída à entidade (ou None, se ela não recebe porção)."""
        ...

    def describe_eating(self) -> str:
        """Descreve como a entidade come.

        Returns:
            Texto legível, com o tamanho da porção quando houver.
            Não tem efeitos colaterais.
        """
        ...
