import pytest

from arenarpg.armas import Baston, Espada, Lanza, Pocion
from arenarpg.guerreros import Barbaro, Caballero, Gladiador, Mercenario, Paladin
from arenarpg.personajes import EnergiaInsuficienteError
from arenarpg.tipos import TipoPersonaje


class _Fijo:
    def __init__(self, valor):
        self.valor = valor

    def randrange(self, n):
        return self.valor


SIN_SUERTE = _Fijo(99)
CON_SUERTE = _Fijo(0)


def _enemigo():
    return Paladin()


def test_tipos():
    assert Barbaro().tipo is TipoPersonaje.BARBARO
    assert Caballero().tipo is TipoPersonaje.CABALLERO
    assert Gladiador().tipo is TipoPersonaje.GLADIADOR
    assert Mercenario(decidir_curar=lambda: False).tipo is TipoPersonaje.MERCENARIO
    assert Paladin().tipo is TipoPersonaje.PALADIN


def test_barbaro_combate_sin_critico():
    espada = Espada()
    b = Barbaro(espada, rng=SIN_SUERTE)
    enemigo = _enemigo()
    dano = b.habilidad(enemigo, espada)
    assert dano == espada.dano
    assert enemigo.vida == 100 - espada.dano
    assert b.energia == 150 - espada.costo_ataque


def test_barbaro_combate_critico():
    espada = Espada()
    b = Barbaro(espada, rng=CON_SUERTE)
    enemigo = _enemigo()
    assert b.habilidad(enemigo, espada) == espada.dano * 2
    assert enemigo.vida == 100 - espada.dano * 2


def test_barbaro_magica_no_gasta_energia():
    baston = Baston()
    b = Barbaro(rng=SIN_SUERTE)
    enemigo = _enemigo()
    assert b.habilidad(enemigo, baston) == baston.dano
    assert b.energia == 150


def test_barbaro_energia_insuficiente():
    espada = Espada()
    b = Barbaro(rng=SIN_SUERTE)
    b.energia = espada.costo_ataque - 1
    enemigo = _enemigo()
    with pytest.raises(EnergiaInsuficienteError):
        b.habilidad(enemigo, espada)
    assert enemigo.vida == 100


def test_barbaro_argumentos_invalidos():
    b = Barbaro()
    with pytest.raises(ValueError):
        b.habilidad(None, Espada())
    with pytest.raises(ValueError):
        b.habilidad(_enemigo(), None)


def test_caballero_sin_regeneracion():
    espada = Espada()
    c = Caballero(rng=SIN_SUERTE)
    enemigo = _enemigo()
    assert c.habilidad(enemigo, espada) == espada.dano
    assert c.energia == 150 - espada.costo_ataque
    assert enemigo.vida == 100 - espada.dano


def test_caballero_regeneracion_limitada_al_maximo():
    c = Caballero(rng=CON_SUERTE)
    c.habilidad(_enemigo(), Espada())
    assert c.energia == 150
    c.habilidad(_enemigo(), Baston())
    assert c.energia == 150


def test_caballero_energia_insuficiente():
    baston = Baston()
    c = Caballero(rng=SIN_SUERTE)
    c.energia = baston.costo_ataque - 1
    enemigo = _enemigo()
    with pytest.raises(EnergiaInsuficienteError):
        c.habilidad(enemigo, baston)
    assert enemigo.vida == 100
    assert c.energia == baston.costo_ataque - 1


def test_gladiador_combate_aumenta_dano():
    espada = Espada()
    enemigo = _enemigo()
    dano = Gladiador().habilidad(enemigo, espada)
    assert dano == 13
    assert enemigo.vida == 100 - dano


def test_gladiador_magica_reduce_dano():
    enemigo = _enemigo()
    dano = Gladiador().habilidad(enemigo, Baston())
    assert dano == 6
    assert 100 - enemigo.vida == 4


def test_gladiador_lanza_supera_dano_base():
    lanza = Lanza()
    enemigo = _enemigo()
    dano = Gladiador().habilidad(enemigo, lanza)
    assert dano > lanza.dano
    assert enemigo.vida == 100 - dano


def test_mercenario_sin_curar():
    pocion = Pocion()
    m = Mercenario(decidir_curar=lambda: False)
    m.recibir_dano(50)
    enemigo = _enemigo()
    assert m.habilidad(enemigo, pocion) == pocion.dano
    assert m.vida == 50
    assert enemigo.vida == 100 - pocion.dano


def test_mercenario_curando():
    espada = Espada()
    m = Mercenario(decidir_curar=lambda: True)
    m.recibir_dano(50)
    enemigo = _enemigo()
    dano = m.habilidad(enemigo, espada)
    assert m.vida == 50 + Mercenario.CURACION
    assert 0 < dano < espada.dano
    assert enemigo.vida == 100 - dano


def test_mercenario_pregunta_por_consola(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "1")
    m = Mercenario()
    m.recibir_dano(40)
    espada = Espada()
    dano = m.habilidad(_enemigo(), espada)
    assert m.vida == 60 + Mercenario.CURACION
    assert dano < espada.dano


def test_mercenario_respuesta_no_numerica(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "abc")
    m = Mercenario()
    m.recibir_dano(40)
    espada = Espada()
    assert m.habilidad(_enemigo(), espada) == espada.dano
    assert m.vida == 60


def test_paladin_espada_dobla():
    espada = Espada()
    enemigo = Barbaro()
    assert Paladin().habilidad(enemigo, espada) == espada.dano * 2
    assert enemigo.vida == 100 - espada.dano * 2


def test_paladin_otras_armas():
    lanza, baston = Lanza(), Baston()
    p = Paladin()
    assert p.habilidad(Barbaro(), lanza) == lanza.dano
    assert p.habilidad(Barbaro(), baston) == baston.dano


def test_habilidad_puede_matar():
    espada = Espada()
    enemigo = Barbaro()
    enemigo.vida = espada.dano
    Paladin().habilidad(enemigo, espada)
    assert enemigo.muerto is True