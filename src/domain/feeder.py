# src/domain/feeder.py
from __future__ import annotations
from typing import Iterable, List, Optional, TextIO, Tuple
import logging
import sys

from src.domain.eater import IEater

log = logging.getLogger("tratador.feeder")


class Feeder:
    """
    Alimenta uma sequência de bichos, na ordem recebida:
    - chama somente describe_eating() de cada um (capacidade IEater)
    - escreve uma linha por bicho na saída
    - não filtra, não repete, não trata erros
    Um bicho novo só precisa implementar IEater; esta classe não muda.
    """

    def __init__(self, entities: Iterable[IEater]) -> None:
        """
        Guarda a sequência de bichos (snapshot em tupla, mesma ordem).

        Args:
            entities: Bichos que implementam IEater. As referências continuam
                sendo do chamador; o Feeder só as consome.
        """
        self._entities: Tuple[IEater, ...] = tuple(entities)

    @property
    def entities(self) -> Tuple[IEater, ...]:
        """Bichos na ordem em que serão alimentados."""
        return self._entities

    def describe_all(self) -> List[str]:
        """
        Monta as linhas que feed_all emitiria, sem escrever nada.

        Returns:
            Lista de descrições, uma por bicho, na ordem da sequência.
        """
        return [e.describe_eating() for e in self._entities]

    def feed_all(self, output: Optional[TextIO] = None) -> None:
        """
        Alimenta todos os bichos, emitindo a descrição de cada um.

        Fluxo resumido:
            - Resolve a saída (stdout por padrão, lido no momento da chamada).
            - Para cada bicho, na ordem: describe_eating() e escreve a linha.
            - Exceções de um bicho sobem direto para o chamador.

        Args:
            output: Stream de texto de destino (default: sys.stdout).
        """
        out = output if output is not None else sys.stdout
        log.info("feed_round entities=%d", len(self._entities))

        for pos, entity in enumerate(self._entities):
            line = entity.describe_eating()
            out.write(line + "\n")
            log.debug("fed pos=%d line=%s", pos, line)
