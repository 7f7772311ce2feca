"""Weapons: combat and magic families and their concrete kinds."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from arenarpg.tipos import ClaseArma, TipoDeArma


def _generador(rng):
    return random if rng is None else rng


def _tirada(rng) -> int:
    """A roll in the range 0..99."""
    return _generador(rng).randrange(100)


class Arma(ABC):
    """A weapon with fixed stats."""

    clase: ClaseArma
    _mensaje_ataque = "Atacando con {dano} de daño."

    def __init__(
        self,
        dano: int,
        velocidad_ataque: int,
        costo_ataque: int,
        peso: int,
        tipo_arma: TipoDeArma,
    ) -> None:
        self.dano = dano
        self.velocidad_ataque = velocidad_ataque
        self.costo_ataque = costo_ataque
        self.peso = peso
        self.tipo_arma = tipo_arma

    def atacar(self) -> int:
        """Announce a plain attack and return its damage."""
        print(self._mensaje_ataque.format(dano=self.dano))
        return self.dano

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(dano={self.dano}, "
            f"velocidad_ataque={self.velocidad_ataque}, "
            f"costo_ataque={self.costo_ataque}, peso={self.peso})"
        )


class ArmaCombate(Arma):
    """A physical weapon with a special attack."""

    clase = ClaseArma.COMBATE
    _mensaje_ataque = "Atacando con {dano} de daño."

    @abstractmethod
    def ataque_especial(self, rng=None) -> int:
        """Try the weapon's special attack and return the damage dealt."""


class ArmaMagica(Arma):
    """A magic weapon with a magic ability."""

    clase = ClaseArma.MAGICA
    _mensaje_ataque = "Atacando con {dano} de dano"

    @abstractmethod
    def habilidad_magica(self, rng=None) -> int:
        """Try the weapon's magic ability and return the damage dealt."""


class Espada(ArmaCombate):
    def __init__(self) -> None:
        super().__init__(10, 3, 10, 20, TipoDeArma.ESPADA)

    def ataque_especial(self, rng=None) -> int:
        if _tirada(rng) < 30:
            print("¡Corte crítico! La espada inflige daño adicional.")
            return self.dano * 2
        print("El ataque especial de la espada no logró un corte crítico.")
        return self.dano

    def filo(self) -> int:
        print("¡Filo! La espada inflige mas dano al ser lanzada.")
        return int(self.dano * 1.5)


class Garrote(ArmaCombate):
    def __init__(self) -> None:
        super().__init__(15, 1, 12, 35, TipoDeArma.GARROTE)

    def ataque_especial(self, rng=None) -> int:
        if _tirada(rng) < 15:
            print("¡Golpe fuerte! El garrote inflige daño masivo.")
            return self.dano * 3
        print("El ataque especial del garrote no logró un golpe fuerte.")
        return self.dano

    def garrote_de_negan(self) -> int:
        print(
            "¡Garrote de Negan! El garrote de negan tiene alambre de pua "
            "y hace mucho mas dano."
        )
        return self.dano * 3


class HachaDoble(ArmaCombate):
    def __init__(self) -> None:
        super().__init__(20, 20, 4, 10, TipoDeArma.DOBLE_HACHA)

    def ataque_especial(self, rng=None) -> int:
        if _tirada(rng) < 20:
            print("¡Ataque rápido! El hacha doble aumenta su velocidad de ataque.")
            print(f"Velocidad de ataque aumentada a: {self.velocidad_ataque + 10}.")
        else:
            print("El ataque especial del hacha doble no logró aumentar la velocidad.")
        return self.dano

    def torbellino(self) -> int:
        print(
            "¡Torbellino! El hacha doble lanza un torbellino que inflige "
            "daño adicional a los enemigos cercanos."
        )
        return self.dano * 2


class HachaSimple(ArmaCombate):
    def __init__(self) -> None:
        super().__init__(12, 10, 2, 5, TipoDeArma.HACHA)

    def ataque_especial(self, rng=None) -> int:
        if _tirada(rng) < 30:
            print(
                "¡Golpe pesado! El hacha simple aumenta su peso, reduce su "
                "velocidad y hace más daño."
            )
            nuevo_dano = self.dano + 8
            print(
                f"Nuevo peso: {self.peso + 2}, nueva velocidad de ataque: "
                f"{self.velocidad_ataque - 1}, nuevo daño: {nuevo_dano}."
            )
            return nuevo_dano
        print("El ataque especial del hacha simple no se activó.")
        return self.dano

    def hacha_de_thor(self) -> int:
        print(
            "¡Hacha de Thor! El hacha simple lanza un rayo que inflige daño adicional."
        )
        return self.dano * 2


class Lanza(ArmaCombate):
    def __init__(self) -> None:
        super().__init__(8, 5, 7, 5, TipoDeArma.LANZA)

    def ataque_especial(self, rng=None) -> int:
        if _tirada(rng) < 25:
            print("¡Filo afilado! La lanza inflige un daño crítico al ser lanzada.")
            return self.dano * 2
        print("El ataque especial de la lanza no activó el filo afilado.")
        return self.dano

    def vuelo(self) -> int:
        print("¡Vuelo! La lanza va por el aire y agarra una velocidad aumentada.")
        return self.velocidad_ataque * 2


class Amuleto(ArmaMagica):
    def __init__(self) -> None:
        # The amulet reports itself as a staff; the game relies on this.
        super().__init__(0, 1, 10, 0, TipoDeArma.BASTON)

    def habilidad_magica(self, rng=None) -> int:
        if _tirada(rng) < 20:
            print(
                "¡Habilidad mágica activada! El amuleto hace un destello magico "
                "que enseguece a los enemigos cernanos."
            )
        else:
            print("La habilidad mágica del amuleto no se activó.")
        return self.dano

    def escudo_individual(self) -> str:
        return (
            "El amuleto proporciona un escudo individual que reduce el daño "
            "recibido en un 50% durante un turno."
        )


class Baston(ArmaMagica):
    def __init__(self) -> None:
        super().__init__(8, 4, 8, 10, TipoDeArma.BASTON)

    def habilidad_magica(self, rng=None) -> int:
        if _tirada(rng) < 25:
            print(
                "¡Habilidad mágica activada! El bastón lanza un rayo mágico "
                "que inflige daño adicional."
            )
            return self.dano * 2
        print("La habilidad mágica del bastón no se activó.")
        return self.dano

    def bola_de_fuego(self) -> int:
        print(
            "¡Bola de fuego lanzada! El bastón lanza una bola de fuego que "
            "inflige daño adicional."
        )
        return self.dano * 2


class LibroDeHechizos(ArmaMagica):
    def __init__(self) -> None:
        super().__init__(15, 2, 10, 15, TipoDeArma.LIBRO_DE_HECHIZOS)

    def habilidad_magica(self, rng=None) -> int:
        if _tirada(rng) < 30:
            print(
                "¡Habilidad mágica activada! El libro de hechizos lanza un "
                "hechizo que relentiza a los enemigos."
            )
        else:
            print("La habilidad mágica del libro de hechizos no se activó.")
        return self.dano

    def dark_hole(self) -> str:
        return (
            "hechizo oscuro, fortalece todas las habilidades mágicas del "
            "usuario y debilita a los enemigos.\n"
        )


class Pocion(ArmaMagica):
    def __init__(self) -> None:
        super().__init__(20, 2, 15, 3, TipoDeArma.POCION)

    def habilidad_magica(self, rng=None) -> int:
        if _tirada(rng) < 50:
            print("¡Habilidad mágica activada! La poción envenena.")
            return int(self.dano * 1.2)
        print("La habilidad mágica de la poción no se activó.")
        return self.dano

    def pocion_de_velocidad(self) -> int:
        print(
            "¡Poción de velocidad activada! Aumenta la velocidad de ataque del usuario."
        )
        return int(self.velocidad_ataque * 1.5)