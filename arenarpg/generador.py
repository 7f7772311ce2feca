"""Random creation of groups of mages and warriors with weapons."""

from __future__ import annotations

import argparse
import random

from arenarpg.armas import (
    Amuleto,
    Arma,
    Baston,
    Espada,
    Garrote,
    HachaDoble,
    HachaSimple,
    Lanza,
    LibroDeHechizos,
    Pocion,
)
from arenarpg.fabrica import nombre_arma, nombre_personaje
from arenarpg.guerreros import Barbaro, Caballero, Gladiador, Mercenario, Paladin
from arenarpg.magos import Brujo, Conjurador, Hechicero, Nigromante
from arenarpg.personajes import Personaje

_MAGOS = (Hechicero, Nigromante, Conjurador, Brujo)
_GUERREROS = (Paladin, Barbaro, Caballero, Mercenario, Gladiador)
_ARMAS_COMBATE = (HachaSimple, HachaDoble, Espada, Lanza, Garrote)
_ARMAS_MAGICAS = (Pocion, Amuleto, Baston, LibroDeHechizos)


def _generador(rng):
    return random if rng is None else rng


def generar_configuracion(rng=None) -> tuple[list[int], list[int]]:
    """Pick 3 to 7 mages and 3 to 7 warriors, each with 0 to 2 weapons.

    Returns the weapon counts of the mages and of the warriors.
    """
    rng = _generador(rng)
    cantidad_magos = 3 + rng.randrange(5)
    cantidad_guerreros = 3 + rng.randrange(5)
    magos = [rng.randrange(3) for _ in range(cantidad_magos)]
    guerreros = [rng.randrange(3) for _ in range(cantidad_guerreros)]
    return magos, guerreros


def generar_mago_aleatorio(arma1: Arma | None, arma2: Arma | None, rng=None) -> Personaje:
    """A mage of a random kind holding the given weapons."""
    rng = _generador(rng)
    clase = _MAGOS[rng.randrange(len(_MAGOS))]
    return clase(arma1, arma2, rng=rng)


def generar_guerrero_aleatorio(
    arma1: Arma | None, arma2: Arma | None, rng=None
) -> Personaje:
    """A warrior of a random kind holding the given weapons."""
    rng = _generador(rng)
    clase = _GUERREROS[rng.randrange(len(_GUERREROS))]
    return clase(arma1, arma2, rng=rng)


def generar_arma_aleatoria(rng=None) -> Arma:
    """A random weapon: first the family, then the kind within it."""
    rng = _generador(rng)
    familia = _ARMAS_COMBATE if rng.randrange(2) == 0 else _ARMAS_MAGICAS
    return familia[rng.randrange(len(familia))]()


def _armas_para(cantidad: int, rng) -> tuple[Arma | None, Arma | None]:
    arma1 = generar_arma_aleatoria(rng) if cantidad >= 1 else None
    arma2 = generar_arma_aleatoria(rng) if cantidad == 2 else None
    return arma1, arma2


def generar_ejercito(rng=None) -> tuple[list[Personaje], list[Personaje]]:
    """Random mages and warriors, each armed as the configuration says."""
    rng = _generador(rng)
    config_magos, config_guerreros = generar_configuracion(rng)
    magos = [
        generar_mago_aleatorio(*_armas_para(cantidad, rng), rng)
        for cantidad in config_magos
    ]
    guerreros = [
        generar_guerrero_aleatorio(*_armas_para(cantidad, rng), rng)
        for cantidad in config_guerreros
    ]
    return magos, guerreros


def _describir(etiqueta: str, numero: int, personaje: Personaje) -> str:
    arma1, arma2 = personaje.armas
    return (
        f"{etiqueta} {numero} ({nombre_personaje(personaje)}): "
        f"Arma 1: {nombre_arma(arma1)}, Arma 2: {nombre_arma(arma2)}"
    )


def main(argv=None) -> int:
    """Create a random army and list it."""
    parser = argparse.ArgumentParser(
        prog="arenarpg-generador",
        description="Crea magos y guerreros aleatorios con sus armas.",
    )
    parser.add_argument("--semilla", type=int, default=None)
    args = parser.parse_args(argv)

    magos, guerreros = generar_ejercito(random.Random(args.semilla))

    print("Magos creados:")
    for numero, mago in enumerate(magos, 1):
        print(_describir("Mago", numero, mago))
    print("Guerreros creados:")
    for numero, guerrero in enumerate(guerreros, 1):
        print(_describir("Guerrero", numero, guerrero))
    return 0