"""Enumerations shared by weapons and characters."""

from enum import Enum


class TipoDeArma(Enum):
    """Concrete kind of weapon, in the fixed order the game uses."""

    BASTON = 0
    LIBRO_DE_HECHIZOS = 1
    AMULETO = 2
    POCION = 3
    ESPADA = 4
    HACHA = 5
    DOBLE_HACHA = 6
    LANZA = 7
    GARROTE = 8


class TipoPersonaje(Enum):
    """Concrete kind of character, in the fixed order the game uses."""

    HECHICERO = 0
    CONJURADOR = 1
    BRUJO = 2
    NIGROMANTE = 3
    GLADIADOR = 4
    PALADIN = 5
    CABALLERO = 6
    MERCENARIO = 7
    BARBARO = 8


class ClaseArma(Enum):
    """Broad family a weapon belongs to."""

    MAGICA = 0
    COMBATE = 1