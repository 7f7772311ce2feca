"""Concrete mages and their abilities."""

from __future__ import annotations

from typing import Callable

from arenarpg.armas import Arma, ArmaMagica
from arenarpg.personajes import Mago, Personaje
from arenarpg.tipos import TipoDeArma, TipoPersonaje


def _preguntar_efecto() -> int:
    print("Elige el efecto de la poción:")
    print("1. Daño extra")
    print("2. Curación")
    print("3. Regeneración de mana")
    respuesta = input()
    try:
        return int(respuesta.strip())
    except ValueError:
        return 0


class Brujo(Mago):
    """A mage who can pick the effect of a potion."""

    tipo = TipoPersonaje.BRUJO
    DANO_EXTRA = 50
    VIDA_CURADA = 30
    MANA_REGENERADO = 40

    def __init__(
        self,
        arma1=None,
        arma2=None,
        *,
        rng=None,
        elegir_efecto: Callable[[], int] | None = None,
    ) -> None:
        super().__init__(arma1, arma2, rng=rng)
        self.elegir_efecto = _preguntar_efecto if elegir_efecto is None else elegir_efecto

    def habilidad(self, enemigo: Personaje, arma: Arma) -> int:
        self._comprobar(enemigo, arma)
        if isinstance(arma, ArmaMagica) and arma.tipo_arma is TipoDeArma.POCION:
            return self._usar_pocion(enemigo)
        enemigo.recibir_dano(arma.dano)
        return arma.dano

    def _usar_pocion(self, enemigo: Personaje) -> int:
        opcion = self.elegir_efecto()
        if opcion == 1:
            print(
                "El brujo usa una poción de daño extra. Daño aumentado en "
                f"{self.DANO_EXTRA} puntos."
            )
            enemigo.recibir_dano(self.DANO_EXTRA)
            return self.DANO_EXTRA
        if opcion == 2:
            print(
                "El brujo usa una poción de curación. Se cura "
                f"{self.VIDA_CURADA} puntos de vida."
            )
            self.curar(self.VIDA_CURADA)
            return self.VIDA_CURADA
        if opcion == 3:
            print(
                "El brujo usa una poción de mana. Regenera "
                f"{self.MANA_REGENERADO} puntos de mana."
            )
            self.mana = min(self.mana + self.MANA_REGENERADO, self.MANA_MAXIMO)
            return self.MANA_REGENERADO
        raise ValueError("Opción no válida. No se aplicó ningún efecto.")


class Conjurador(Mago):
    """A mage who may heal and restore mana with an amulet."""

    tipo = TipoPersonaje.CONJURADOR
    MANA_ANUNCIADO = 50

    def habilidad(self, enemigo: Personaje, arma: Arma) -> int:
        self._comprobar(enemigo, arma)
        if isinstance(arma, ArmaMagica) and arma.tipo_arma is TipoDeArma.AMULETO:
            if self.rng.randrange(100) < 30:
                vida_curada = int(0.2 * self.vida)
                self.curar(vida_curada)
                # The current mana is added to itself, then capped.
                self.mana = min(self.mana + self.mana, self.MANA_MAXIMO)
                print(
                    f"El conjurador se curó {vida_curada} puntos de vida y "
                    f"regeneró {self.MANA_ANUNCIADO} puntos de mana."
                )
                return vida_curada
            print("El conjurador no logró activar el efecto del amuleto.")
            return 0
        enemigo.recibir_dano(arma.dano)
        return arma.dano


class Hechicero(Mago):
    """A mage who doubles the damage of a spell book."""

    tipo = TipoPersonaje.HECHICERO

    def habilidad(self, enemigo: Personaje, arma: Arma) -> int:
        self._comprobar(enemigo, arma)
        dano = arma.dano
        if (
            isinstance(arma, ArmaMagica)
            and arma.tipo_arma is TipoDeArma.LIBRO_DE_HECHIZOS
        ):
            dano *= 2
        enemigo.recibir_dano(dano)
        return dano


class Nigromante(Mago):
    """A mage who fights only with combat weapons and may rise again."""

    tipo = TipoPersonaje.NIGROMANTE
    VIDA_RENACER = 25

    def habilidad(self, enemigo: Personaje, arma: Arma) -> int:
        self._comprobar(enemigo, arma)
        if isinstance(arma, ArmaMagica):
            return 0
        dano = arma.dano
        enemigo.recibir_dano(dano)
        if self.vida <= 0:
            self.curar(self.VIDA_RENACER)
            print(f"El Nigromante ha renacido con {self.VIDA_RENACER} de vida!")
        return dano