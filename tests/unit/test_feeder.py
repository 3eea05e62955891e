# tests/unit/test_feeder.py
from __future__ import annotations
import inspect
import io
import logging
from dataclasses import dataclass
from typing import Optional

import pytest

from src.domain import feeder as feeder_module
from src.domain.feeder import Feeder
from src.domain.value_objects import Portion
from src.domain.entities.cat import Cat
from src.domain.entities.dog import Dog
from src.domain.entities.rat import Rat

# ---------- Fakes ----------

@dataclass(frozen=True)
class Hamster:
    """Bicho que só existe nos testes: o Feeder não sabe nada dele."""
    name: str
    portion: Optional[Portion] = None

    def describe_eating(self) -> str:
        return f"{self.name} the hamster nibbles seeds."

class Grumpy:
    portion = None
    def describe_eating(self) -> str:
        raise RuntimeError("não quero comer")

def _emit(entities) -> list:
    buf = io.StringIO()
    Feeder(entities).feed_all(buf)
    return buf.getvalue().splitlines()

# ---------- Tests ----------

def test_gato_e_cachorro_em_ordem():
    lines = _emit([Cat("KiKi", Portion(5)), Dog("Rover", Portion(10))])
    assert len(lines) == 2
    assert "KiKi" in lines[0] and "5" in lines[0] and "cat" in lines[0]
    assert "Rover" in lines[1] and "10" in lines[1] and "dog" in lines[1]

def test_rato_entra_como_terceira_linha():
    lines = _emit([Cat("KiKi", Portion(5)), Dog("Rover", Portion(10)), Rat()])
    assert len(lines) == 3
    assert lines[2] == Rat().describe_eating()
    assert not any(ch.isdigit() for ch in lines[2])

def test_ordem_preservada_na_entrada_invertida():
    entities = [Rat(), Dog("Rover", Portion(10)), Cat("KiKi", Portion(5))]
    assert _emit(entities) == [e.describe_eating() for e in entities]

def test_bicho_novo_sem_mudar_feeder():
    lines = _emit([Hamster("Nibbles"), Cat("KiKi", Portion(5))])
    assert lines[0] == "Nibbles the hamster nibbles seeds."
    assert lines[1].startswith("KiKi")

def test_feeder_nao_inspeciona_tipo():
    src = inspect.getsource(feeder_module)
    for forbidden in ("isinstance", "type(", "hasattr", "getattr", "__class__"):
        assert forbidden not in src

def test_sequencia_vazia_nao_emite():
    assert _emit([]) == []

def test_stdout_por_padrao(capsys):
    Feeder([Cat("KiKi", Portion(5))]).feed_all()
    assert capsys.readouterr().out == "KiKi the cat eats 5 portions of fish.\n"

def test_describe_all_igual_ao_emitido():
    f = Feeder([Dog("Rover", Portion(10)), Rat()])
    assert f.describe_all() == _emit(f.entities)

def test_snapshot_de_iteravel():
    f = Feeder(iter([Rat(), Rat()]))
    assert len(f.entities) == 2
    assert len(_emit(f.entities)) == 2

def test_erro_de_bicho_propaga():
    buf = io.StringIO()
    with pytest.raises(RuntimeError):
        Feeder([Cat("KiKi", Portion(5)), Grumpy(), Rat()]).feed_all(buf)
    # a linha anterior ao erro já foi emitida, a posterior não
    assert buf.getvalue().splitlines() == ["KiKi the cat eats 5 portions of fish."]

def test_log_da_rodada(caplog):
    with caplog.at_level(logging.INFO, logger="tratador.feeder"):
        Feeder([Rat()]).feed_all(io.StringIO())
    assert "feed_round entities=1" in caplog.text
