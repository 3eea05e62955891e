# run.py — Demonstração no console
# =============================================================================
# RODADA 1: gato e cachorro
# RODADA 2: mesma lista + rato (entra sem alterar o Feeder)
# Execução:
#   python run.py
# =============================================================================

from __future__ import annotations

import logging

from config.settings import LOG_LEVEL, LOG_FORMAT
from src.domain.value_objects import Portion
from src.domain.entities.cat import Cat
from src.domain.entities.dog import Dog
from src.domain.entities.rat import Rat
from src.domain.feeder import Feeder
from src.domain.use_cases.summarize_feeding_use_case import SummarizeFeedingUseCase

log = logging.getLogger("tratador.run")


def main() -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper()), format=LOG_FORMAT)

    kiki = Cat("KiKi", Portion(5))
    rover = Dog("Rover", Portion(10))

    rounds = [
        [kiki, rover],
        [kiki, rover, Rat()],
    ]

    summarize = SummarizeFeedingUseCase()
    for n, entities in enumerate(rounds, start=1):
        print(f"--- rodada {n} ---")
        Feeder(entities).feed_all()
        res = summarize.execute(entities)
        log.info("round_done n=%d summary=%s", n, res.summary)


if __name__ == "__main__":
    main()
