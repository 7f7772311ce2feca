"""Characters: the common base and the warrior and mage families."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from arenarpg.armas import Arma, ArmaCombate, ArmaMagica
from arenarpg.tipos import TipoPersonaje

VIDA_MAXIMA = 100


class ArmasCompletasError(Exception):
    """Raised when a character already carries two weapons."""


class EnergiaInsuficienteError(Exception):
    """Raised when a warrior lacks the energy a weapon costs."""


class Personaje(ABC):
    """A character with health, a death flag and up to two weapons."""

    tipo: TipoPersonaje

    def __init__(
        self,
        arma1: Arma | None = None,
        arma2: Arma | None = None,
        *,
        rng=None,
    ) -> None:
        self.vida = VIDA_MAXIMA
        self.muerto = False
        self.armas: tuple[Arma | None, Arma | None] = (arma1, arma2)
        self.rng = random if rng is None else rng

    def recibir_dano(self, dano: int) -> None:
        """Lose health; the character dies when it reaches zero or less."""
        self.vida -= dano
        if self.vida <= 0:
            self.muerto = True

    def curar(self, curacion: int) -> None:
        """Gain health, never above the maximum."""
        self.vida = min(self.vida + curacion, VIDA_MAXIMA)

    def equipar_arma(self, arma: Arma) -> None:
        """Put a weapon in the first free hand."""
        primera, segunda = self.armas
        if primera is None:
            self.armas = (arma, segunda)
        elif segunda is None:
            self.armas = (primera, arma)
        else:
            raise ArmasCompletasError("ya tiene las dos armas")

    @abstractmethod
    def habilidad(self, enemigo: Personaje, arma: Arma) -> int:
        """Use the character's ability on an enemy and return its effect."""

    @staticmethod
    def _comprobar(enemigo: Personaje | None, arma: Arma | None) -> None:
        if enemigo is None or arma is None:
            raise ValueError("enemigo o arma no válidos")
        if not isinstance(arma, (ArmaCombate, ArmaMagica)):
            raise TypeError("tipo de arma no válido")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vida={self.vida}, muerto={self.muerto})"


class Guerrero(Personaje):
    """A warrior, who spends energy to fight."""

    ENERGIA_MAXIMA = 150

    def __init__(self, arma1=None, arma2=None, *, rng=None) -> None:
        super().__init__(arma1, arma2, rng=rng)
        self.energia = self.ENERGIA_MAXIMA


class Mago(Personaje):
    """A mage, who holds a pool of mana."""

    MANA_MAXIMO = 200

    def __init__(self, arma1=None, arma2=None, *, rng=None) -> None:
        super().__init__(arma1, arma2, rng=rng)
        self.mana = self.MANA_MAXIMO