# src/domain/use_cases/summarize_feeding_use_case.py
from __future__ import annotations
from dataclasses import dataclass
from statistics import mean
from typing import Dict, Any, Iterable, List
import logging

from src.domain.eater import IEater

log = logging.getLogger("tratador.usecases.summary")

@dataclass(frozen=True)
class FeedingSummary:
    """
    DTO imutável para retorno do caso de uso.

    Atributos:
        summary: dicionário com agregações calculadas. Espera-se as chaves:
            - 'count': int
            - 'portioned': int
            - 'unportioned': int
            - 'total_portion': float
            - 'avg_portion': float | None
    """
    summary: Dict[str, Any]

class SummarizeFeedingUseCase:
    """
    Agrega as porções de uma rodada de alimentação.
    Usa somente o atributo `portion` do contrato IEater, nunca o tipo do bicho.
    """

    def execute(self, entities: Iterable[IEater]) -> FeedingSummary:
        """
        Executa a agregação para uma rodada.

        Args:
            entities: Bichos da rodada (mesma sequência entregue ao Feeder).

        Returns:
            FeedingSummary: objeto com o dicionário 'summary' contendo
            contagens, total e média das porções.
        """
        entities = list(entities)
        sizes: List[float] = [float(e.portion.size) for e in entities if e.portion is not None]

        summary = {
            "count":         len(entities),
            "portioned":     len(sizes),
            "unportioned":   len(entities) - len(sizes),
            "total_portion": round(sum(sizes), 2),
            # sem porções -> None (evita StatisticsError)
            "avg_portion":   round(mean(sizes), 2) if sizes else None,
        }
        log.info("feeding_summary count=%s total=%s", summary["count"], summary["total_portion"])
        return FeedingSummary(summary=summary)
