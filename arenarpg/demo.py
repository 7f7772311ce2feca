"""Walk-through of weapons, characters and their abilities."""

from __future__ import annotations

import argparse
import random
from typing import Callable

from arenarpg.armas import Arma, Baston, Espada
from arenarpg.guerreros import Barbaro
from arenarpg.magos import Hechicero
from arenarpg.personajes import Personaje


def _mostrar_arma(titulo: str, arma: Arma, escribir: Callable[[str], None]) -> None:
    escribir(titulo)
    escribir(f"Tipo: {arma.clase.value}")
    escribir(f"Daño: {arma.dano}")
    escribir(f"Velocidad de ataque: {arma.velocidad_ataque}")
    escribir(f"Costo de ataque: {arma.costo_ataque}")
    escribir(f"Peso: {arma.peso}")
    escribir(f"Ataque: {arma.atacar()}")


def _probar_personaje(
    titulo: str,
    personaje: Personaje,
    dano: int,
    curacion: int,
    escribir: Callable[[str], None],
) -> None:
    escribir(titulo)
    escribir(f"Vida: {personaje.vida}")
    escribir(f"Tipo: {personaje.tipo.value}")
    personaje.recibir_dano(dano)
    escribir(f"Vida después de daño: {personaje.vida}")
    personaje.curar(curacion)
    escribir(f"Vida después de curación: {personaje.vida}")
    escribir(f"¿Está muerto?: {'Sí' if personaje.muerto else 'No'}")


def ejecutar_demo(rng=None, escribir: Callable[[str], None] = print):
    """Exercise a staff, a sword, a sorcerer and a barbarian.

    Returns the sorcerer and the barbarian as they stand at the end.
    """
    rng = random if rng is None else rng
    baston = Baston()
    espada = Espada()
    hechicero = Hechicero(baston, None, rng=rng)
    barbaro = Barbaro(espada, None, rng=rng)

    escribir("\n=== Pruebas de Armas ===")
    _mostrar_arma("Bastón - Arma Mágica:", baston, escribir)
    escribir("")
    _mostrar_arma("Espada - Arma de Combate:", espada, escribir)

    escribir("\n=== Pruebas de Personajes ===")
    _probar_personaje("Hechicero:", hechicero, 30, 20, escribir)
    escribir("")
    _probar_personaje("Bárbaro:", barbaro, 40, 15, escribir)

    escribir("\n=== Prueba de Habilidades ===")
    escribir("Habilidad Bárbaro contra Hechicero:")
    dano = barbaro.habilidad(hechicero, espada)
    escribir(f"Daño causado por habilidad del bárbaro: {dano}")

    escribir("\nHabilidad Hechicero contra Bárbaro:")
    dano = hechicero.habilidad(barbaro, baston)
    escribir(f"Daño causado por habilidad del hechicero: {dano}")

    escribir("\n=== Prueba de Habilidades de Armas ===")
    escribir("Bastón:")
    escribir(f"Bola de fuego: {baston.bola_de_fuego()} de daño")
    escribir(f"Habilidad mágica: {baston.habilidad_magica(rng)} de daño")

    escribir("\nEspada:")
    escribir(f"Filo{espada.filo()} de daño")
    escribir(f"Habilidad de combate: {espada.ataque_especial(rng)} de daño")

    return hechicero, barbaro


def main(argv=None) -> int:
    """Run the walk-through on standard output."""
    parser = argparse.ArgumentParser(
        prog="arenarpg-demo",
        description="Muestra armas, personajes y habilidades.",
    )
    parser.parse_args(argv)
    ejecutar_demo()
    return 0