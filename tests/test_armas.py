import random

import pytest

from arenarpg.armas import (
    Amuleto,
    Arma,
    ArmaCombate,
    ArmaMagica,
    Baston,
    Espada,
    Garrote,
    HachaDoble,
    HachaSimple,
    Lanza,
    LibroDeHechizos,
    Pocion,
)
from arenarpg.tipos import ClaseArma, TipoDeArma


class _RngFijo:
    def __init__(self, valor):
        self.valor = valor
        self.llamadas = []

    def randrange(self, n):
        self.llamadas.append(n)
        return self.valor


@pytest.mark.parametrize(
    "cls, stats, tipo",
    [
        (Espada, (10, 3, 10, 20), TipoDeArma.ESPADA),
        (Garrote, (15, 1, 12, 35), TipoDeArma.GARROTE),
        (HachaDoble, (20, 20, 4, 10), TipoDeArma.DOBLE_HACHA),
        (HachaSimple, (12, 10, 2, 5), TipoDeArma.HACHA),
        (Lanza, (8, 5, 7, 5), TipoDeArma.LANZA),
        (Amuleto, (0, 1, 10, 0), TipoDeArma.BASTON),
        (Baston, (8, 4, 8, 10), TipoDeArma.BASTON),
        (LibroDeHechizos, (15, 2, 10, 15), TipoDeArma.LIBRO_DE_HECHIZOS),
        (Pocion, (20, 2, 15, 3), TipoDeArma.POCION),
    ],
)
def test_stats(cls, stats, tipo):
    arma = cls()
    assert (arma.dano, arma.velocidad_ataque, arma.costo_ataque, arma.peso) == stats
    assert arma.tipo_arma is tipo


@pytest.mark.parametrize("cls", [Espada, Garrote, HachaDoble, HachaSimple, Lanza])
def test_combat_family(cls):
    arma = cls()
    assert isinstance(arma, ArmaCombate)
    assert arma.clase is ClaseArma.COMBATE


@pytest.mark.parametrize("cls", [Amuleto, Baston, LibroDeHechizos, Pocion])
def test_magic_family(cls):
    arma = cls()
    assert isinstance(arma, ArmaMagica)
    assert arma.clase is ClaseArma.MAGICA


def test_atacar_combate_prints_and_returns_damage(capsys):
    espada = Espada()
    assert espada.atacar() == espada.dano
    assert capsys.readouterr().out == "Atacando con 10 de daño.\n"


def test_atacar_magica_prints_and_returns_damage(capsys):
    baston = Baston()
    assert baston.atacar() == baston.dano
    assert capsys.readouterr().out == "Atacando con 8 de dano\n"


@pytest.mark.parametrize(
    "cls, umbral, factor",
    [(Espada, 30, 2), (Garrote, 15, 3), (Lanza, 25, 2)],
)
def test_multiplying_specials(cls, umbral, factor):
    arma = cls()
    assert arma.ataque_especial(_RngFijo(umbral - 1)) == arma.dano * factor
    assert arma.ataque_especial(_RngFijo(umbral)) == arma.dano


def test_special_rolls_out_of_hundred():
    rng = _RngFijo(99)
    Espada().ataque_especial(rng)
    assert rng.llamadas == [100]


def test_hacha_simple_special():
    hacha = HachaSimple()
    assert hacha.ataque_especial(_RngFijo(0)) == hacha.dano + 8
    assert hacha.ataque_especial(_RngFijo(30)) == hacha.dano


def test_hacha_simple_special_message(capsys):
    HachaSimple().ataque_especial(_RngFijo(10))
    assert "Nuevo peso: 7, nueva velocidad de ataque: 9, nuevo daño: 20." in (
        capsys.readouterr().out
    )


def test_hacha_doble_special_never_changes_damage(capsys):
    hacha = HachaDoble()
    assert hacha.ataque_especial(_RngFijo(0)) == hacha.dano
    assert "Velocidad de ataque aumentada a: 30." in capsys.readouterr().out
    assert hacha.ataque_especial(_RngFijo(50)) == hacha.dano
    assert hacha.velocidad_ataque == 20


def test_baston_habilidad():
    baston = Baston()
    assert baston.habilidad_magica(_RngFijo(24)) == baston.dano * 2
    assert baston.habilidad_magica(_RngFijo(25)) == baston.dano


@pytest.mark.parametrize("cls", [Amuleto, LibroDeHechizos])
@pytest.mark.parametrize("tirada", [0, 50, 99])
def test_flat_magic_abilities(cls, tirada):
    arma = cls()
    assert arma.habilidad_magica(_RngFijo(tirada)) == arma.dano


def test_pocion_habilidad():
    pocion = Pocion()
    assert pocion.habilidad_magica(_RngFijo(49)) == 24
    assert pocion.habilidad_magica(_RngFijo(50)) == pocion.dano


def test_fixed_abilities():
    assert Espada().filo() == 15
    assert Garrote().garrote_de_negan() == Garrote().dano * 3
    assert HachaDoble().torbellino() == HachaDoble().dano * 2
    assert HachaSimple().hacha_de_thor() == HachaSimple().dano * 2
    assert Lanza().vuelo() == Lanza().velocidad_ataque * 2
    assert Baston().bola_de_fuego() == Baston().dano * 2
    assert Pocion().pocion_de_velocidad() == 3


def test_text_abilities():
    assert Amuleto().escudo_individual() == (
        "El amuleto proporciona un escudo individual que reduce el daño "
        "recibido en un 50% durante un turno."
    )
    assert LibroDeHechizos().dark_hole().startswith("hechizo oscuro")


@pytest.mark.parametrize("cls", [Espada, Garrote, HachaSimple, Lanza, HachaDoble])
def test_real_rng_results_within_bounds(cls):
    arma = cls()
    rng = random.Random(1234)
    for _ in range(50):
        assert arma.dano <= arma.ataque_especial(rng) <= arma.dano * 3


def test_default_rng_is_usable():
    baston = Baston()
    assert baston.habilidad_magica() in {baston.dano, baston.dano * 2}