"""A duel between the player and a random rival."""

from __future__ import annotations

import argparse
import random
from enum import Enum

from arenarpg.armas import Arma
from arenarpg.fabrica import crear_arma, crear_personaje, nombre_arma, nombre_personaje
from arenarpg.personajes import Personaje
from arenarpg.tipos import TipoDeArma, TipoPersonaje

DANO_RONDA = 10


class Ataque(Enum):
    """The three moves of a round."""

    GOLPE_FUERTE = 1
    GOLPE_RAPIDO = 2
    DEFENSA_Y_GOLPE = 3

    def __str__(self) -> str:
        return _NOMBRES_ATAQUE[self]


_NOMBRES_ATAQUE = {
    Ataque.GOLPE_FUERTE: "Golpe Fuerte",
    Ataque.GOLPE_RAPIDO: "Golpe Rapido",
    Ataque.DEFENSA_Y_GOLPE: "Defensa y Golpe",
}

# Each move beats the one it maps to.
_GANA_A = {
    Ataque.GOLPE_FUERTE: Ataque.GOLPE_RAPIDO,
    Ataque.GOLPE_RAPIDO: Ataque.DEFENSA_Y_GOLPE,
    Ataque.DEFENSA_Y_GOLPE: Ataque.GOLPE_FUERTE,
}

_ARMAS_JUGADOR = {
    1: TipoDeArma.ESPADA,
    2: TipoDeArma.HACHA,
    3: TipoDeArma.GARROTE,
    4: TipoDeArma.LANZA,
    5: TipoDeArma.DOBLE_HACHA,
    6: TipoDeArma.BASTON,
    7: TipoDeArma.AMULETO,
    8: TipoDeArma.LIBRO_DE_HECHIZOS,
    9: TipoDeArma.POCION,
}

_PERSONAJES_JUGADOR = {
    1: TipoPersonaje.BARBARO,
    2: TipoPersonaje.PALADIN,
    3: TipoPersonaje.GLADIADOR,
    4: TipoPersonaje.CABALLERO,
    5: TipoPersonaje.MERCENARIO,
    6: TipoPersonaje.HECHICERO,
    7: TipoPersonaje.CONJURADOR,
    8: TipoPersonaje.BRUJO,
    9: TipoPersonaje.NIGROMANTE,
}

_MENU_PERSONAJES = (
    "Elige tu personaje:\n1. Barbaro\n2. Paladin\n3. Gladiador\n4. Caballero\n"
    "5. Mercenario\n6. Hechicero\n7. Conjurador\n8. Brujo\n9. Nigromante"
)
_MENU_ARMAS = (
    "Elige tu arma:\n1. Espada\n2. Hacha\n3. Garrote\n4. Lanza\n5. Hacha Doble\n"
    "6. Baston\n7. Amuleto\n8. Libro de Hechizos\n9. Pocion"
)


def ataque_desde_opcion(opcion: int) -> Ataque:
    """The move for a menu option 1, 2 or 3."""
    try:
        return Ataque(opcion)
    except ValueError:
        raise ValueError(f"Opción inválida: {opcion!r}") from None


def ataque_aleatorio(rng=None) -> Ataque:
    """A move picked at random."""
    rng = random if rng is None else rng
    return ataque_desde_opcion(rng.randrange(3) + 1)


def crear_personaje_rival(rng=None) -> Personaje:
    """A character of a random kind holding one random weapon."""
    rng = random if rng is None else rng
    tipo = TipoPersonaje(rng.randrange(len(TipoPersonaje)))
    arma = crear_arma(TipoDeArma(rng.randrange(len(TipoDeArma))))
    return crear_personaje(tipo, arma, None)


def crear_arma_jugador(opcion: int) -> Arma:
    """The weapon for a menu option 1 to 9."""
    try:
        tipo = _ARMAS_JUGADOR[opcion]
    except KeyError:
        raise ValueError("Opción inválida.") from None
    return crear_arma(tipo)


def crear_personaje_jugador(opcion_personaje: int, opcion_arma: int) -> Personaje:
    """The character for a menu option, holding the weapon of another."""
    try:
        arma = crear_arma_jugador(opcion_arma)
    except ValueError as exc:
        raise ValueError("Error al crear el arma. Saliendo del programa.") from exc
    try:
        tipo = _PERSONAJES_JUGADOR[opcion_personaje]
    except KeyError:
        raise ValueError("Opción inválida.") from None
    return crear_personaje(tipo, arma, None)


def resolver_ronda(
    jugador1: Personaje, jugador2: Personaje, ataque1: Ataque, ataque2: Ataque
) -> Personaje | None:
    """Play one round and return the character that took damage, if any."""
    tipo1 = nombre_personaje(jugador1)
    tipo2 = nombre_personaje(jugador2)

    if ataque1 is ataque2:
        print(f"Ambos jugadores eligieron {ataque1}. No hay daño esta ronda.\n")
        print(f"{tipo1} tiene {jugador1.vida} HP y {tipo2} tiene {jugador2.vida} HP.")
        return None

    arma1 = jugador1.armas[0]
    arma2 = jugador2.armas[0]
    nombre1 = nombre_arma(arma1) if arma1 is not None else "Sin Arma"
    nombre2 = nombre_arma(arma2) if arma2 is not None else "Sin Arma"

    if _GANA_A[ataque1] is ataque2:
        if ataque1 is Ataque.DEFENSA_Y_GOLPE:
            print(
                f"{tipo1} bloquea el ataque de {tipo2} y hace "
                f"{DANO_RONDA} puntos de daño."
            )
        else:
            print(f"{tipo1} ataca con {nombre1} y hace {DANO_RONDA} puntos de daño.")
        herido = jugador2
    else:
        print(f"{tipo2} ataca con {nombre2} y hace {DANO_RONDA} puntos de daño.")
        herido = jugador1
    herido.recibir_dano(DANO_RONDA)

    print(f"{tipo1} tiene {jugador1.vida} HP y {tipo2} tiene {jugador2.vida} HP.\n")
    return herido


def _leer_entero(prompt: str = "") -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _pedir_ataque() -> Ataque:
    while True:
        opcion = _leer_entero(
            "Su opción: (1) Golpe Fuerte, (2) Golpe Rápido, (3) Defensa y Golpe: "
        )
        try:
            return ataque_desde_opcion(opcion)
        except ValueError:
            print("Opción inválida. Por favor, elige una opción válida.")


def main(argv=None) -> int:
    """Play a duel on the terminal."""
    parser = argparse.ArgumentParser(
        prog="arenarpg-juego",
        description="Combate contra un rival aleatorio.",
    )
    parser.add_argument("--semilla", type=int, default=None)
    args = parser.parse_args(argv)
    rng = random.Random(args.semilla)

    print("¡Bienvenido al juego de combate!\n")
    print(_MENU_PERSONAJES)
    opcion_personaje = _leer_entero()
    print(_MENU_ARMAS)
    opcion_arma = _leer_entero()
    try:
        jugador1 = crear_personaje_jugador(opcion_personaje, opcion_arma)
    except ValueError as exc:
        print(exc)
        return 1

    jugador2 = crear_personaje_rival(rng)
    print(
        f"\nTu oponente será un {nombre_personaje(jugador2)} con "
        f"{nombre_arma(jugador2.armas[0])}\n"
    )

    while jugador1.vida > 0 and jugador2.vida > 0:
        print(
            f"El jugador 1 tiene {jugador1.vida} HP y el jugador 2 tiene "
            f"{jugador2.vida} HP."
        )
        resolver_ronda(jugador1, jugador2, _pedir_ataque(), ataque_aleatorio(rng))

    print("\n¡Juego terminado!")
    if jugador1.vida <= 0:
        print(f"¡Has perdido! Ganó el {nombre_personaje(jugador2)}")
    else:
        print(f"¡Has ganado! Derrotaste al {nombre_personaje(jugador2)}")
    return 0