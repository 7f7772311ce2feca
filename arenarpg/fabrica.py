"""Creation of weapons and characters by kind, and their display names."""

from __future__ import annotations

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
from arenarpg.guerreros import Barbaro, Caballero, Gladiador, Mercenario, Paladin
from arenarpg.magos import Brujo, Conjurador, Hechicero, Nigromante
from arenarpg.personajes import Personaje
from arenarpg.tipos import TipoDeArma, TipoPersonaje

_ARMAS = {
    TipoDeArma.ESPADA: Espada,
    TipoDeArma.HACHA: HachaSimple,
    TipoDeArma.GARROTE: Garrote,
    TipoDeArma.LANZA: Lanza,
    TipoDeArma.DOBLE_HACHA: HachaDoble,
    TipoDeArma.BASTON: Baston,
    TipoDeArma.AMULETO: Amuleto,
    TipoDeArma.LIBRO_DE_HECHIZOS: LibroDeHechizos,
    TipoDeArma.POCION: Pocion,
}

_PERSONAJES = {
    TipoPersonaje.BARBARO: Barbaro,
    TipoPersonaje.PALADIN: Paladin,
    TipoPersonaje.GLADIADOR: Gladiador,
    TipoPersonaje.CABALLERO: Caballero,
    TipoPersonaje.MERCENARIO: Mercenario,
    TipoPersonaje.HECHICERO: Hechicero,
    TipoPersonaje.CONJURADOR: Conjurador,
    TipoPersonaje.BRUJO: Brujo,
    TipoPersonaje.NIGROMANTE: Nigromante,
}

_NOMBRES_ARMA = {
    TipoDeArma.HACHA: "Hacha Simple",
    TipoDeArma.DOBLE_HACHA: "Hacha Doble",
    TipoDeArma.ESPADA: "Espada",
    TipoDeArma.LANZA: "Lanza",
    TipoDeArma.GARROTE: "Garrote",
    TipoDeArma.POCION: "Poción",
    TipoDeArma.AMULETO: "Amuleto",
    TipoDeArma.BASTON: "Bastón",
    TipoDeArma.LIBRO_DE_HECHIZOS: "Libro de Hechizos",
}

_NOMBRES_PERSONAJE = {
    TipoPersonaje.HECHICERO: "Hechicero",
    TipoPersonaje.NIGROMANTE: "Nigromante",
    TipoPersonaje.CONJURADOR: "Conjurador",
    TipoPersonaje.BRUJO: "Brujo",
    TipoPersonaje.PALADIN: "Paladín",
    TipoPersonaje.BARBARO: "Bárbaro",
    TipoPersonaje.CABALLERO: "Caballero",
    TipoPersonaje.MERCENARIO: "Mercenario",
    TipoPersonaje.GLADIADOR: "Gladiador",
}


def crear_arma(tipo: TipoDeArma) -> Arma:
    """Build a new weapon of the given kind."""
    try:
        clase = _ARMAS[tipo]
    except (KeyError, TypeError):
        raise ValueError(f"Tipo de arma no reconocido: {tipo!r}") from None
    return clase()


def crear_personaje(
    tipo: TipoPersonaje, arma1: Arma | None = None, arma2: Arma | None = None
) -> Personaje:
    """Build a new character of the given kind, holding the given weapons."""
    try:
        clase = _PERSONAJES[tipo]
    except (KeyError, TypeError):
        raise ValueError(f"Tipo de personaje no reconocido: {tipo!r}") from None
    return clase(arma1, arma2)


def nombre_arma(arma: Arma | None) -> str:
    """Display name of a weapon, or "Sin arma" when there is none."""
    if arma is None:
        return "Sin arma"
    return _NOMBRES_ARMA.get(arma.tipo_arma, "Arma desconocida")


def nombre_personaje(personaje: Personaje) -> str:
    """Display name of a character's kind."""
    return _NOMBRES_PERSONAJE.get(personaje.tipo, "Personaje desconocido")