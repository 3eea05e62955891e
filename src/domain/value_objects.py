import math
from dataclasses import dataclass
from numbers import Real

from config.settings import PORTION_LIMITS


@dataclass(frozen=True)
class Portion:
    """
    Value Object para uma porção de comida.

    - Imutável (frozen).
    - Valida o tamanho no __post_init__ contra PORTION_LIMITS.
    - Em caso de tamanho inválido, levanta ValueError com mensagem padronizada.
    """
    size: float

    def __post_init__(self):
        """
        Regras:
        - size precisa ser número real (bool não conta)
        - size finito, > min e <= max
        """
        if isinstance(self.size, bool) or not isinstance(self.size, Real):
            raise ValueError(f"Porção inválida: {self.size!r} não é numérico.")

        lo = float(PORTION_LIMITS.get("min", 0.0))
        hi = float(PORTION_LIMITS.get("max", 1000.0))
        if not math.isfinite(self.size) or not (lo < self.size <= hi):
            raise ValueError(f"Porção inválida: {self.size}. Range: ({lo}, {hi}]")

    def __str__(self) -> str:
        # 5.0 -> "5", 2.5 -> "2.5"
        if float(self.size).is_integer():
            return str(int(self.size))
        return str(self.size)
