"""Concrete warriors and their abilities."""

from __future__ import annotations

from typing import Callable

from arenarpg.armas import Arma, ArmaMagica
from arenarpg.personajes import EnergiaInsuficienteError, Guerrero, Personaje
from arenarpg.tipos import TipoDeArma, TipoPersonaje


class Barbaro(Guerrero):
    """A warrior whose blows may land critically."""

    tipo = TipoPersonaje.BARBARO

    def habilidad(self, enemigo: Personaje, arma: Arma) -> int:
        self._comprobar(enemigo, arma)
        dano = arma.dano
        if isinstance(arma, ArmaMagica):
            if self.rng.randrange(100) < 20:
                dano *= 2
            enemigo.recibir_dano(dano)
            return dano

        if self.rng.randrange(100) < 25:
            dano *= 2
        costo = arma.costo_ataque
        if self.energia < costo:
            raise EnergiaInsuficienteError("energía insuficiente para atacar")
        self.energia -= costo
        enemigo.recibir_dano(dano)
        return dano


class Caballero(Guerrero):
    """A warrior who pays energy per attack and may regain some of it."""

    tipo = TipoPersonaje.CABALLERO

    def habilidad(self, enemigo: Personaje, arma: Arma) -> int:
        self._comprobar(enemigo, arma)
        costo = arma.costo_ataque
        if self.energia < costo:
            raise EnergiaInsuficienteError(
                "energía insuficiente para realizar el ataque"
            )
        self.energia -= costo

        dano = arma.dano
        enemigo.recibir_dano(dano)

        if self.rng.randrange(10) < 3:
            factor = 0.15 if isinstance(arma, ArmaMagica) else 0.2
            regenerada = int(self.energia * factor)
            self.energia = min(self.energia + regenerada, self.ENERGIA_MAXIMA)
            print(
                f"El caballero inflige {dano} de daño y regenera "
                f"{regenerada} de energía."
            )
        else:
            print(f"El caballero inflige {dano} de daño.")
        return dano


class Gladiador(Guerrero):
    """A warrior strong with combat weapons and weak with magic ones."""

    tipo = TipoPersonaje.GLADIADOR

    def habilidad(self, enemigo: Personaje, arma: Arma) -> int:
        self._comprobar(enemigo, arma)
        if isinstance(arma, ArmaMagica):
            reducido = int(arma.dano * 0.8)
            enemigo.recibir_dano(int(reducido * 0.8))
            return reducido
        incrementado = int(arma.dano * 1.3)
        enemigo.recibir_dano(incrementado)
        return incrementado


def _preguntar_curar() -> bool:
    respuesta = input(
        "¿Quieres curarte a cambio de infligir menos daño? (1: Sí, 0: No): "
    )
    try:
        return int(respuesta.strip()) == 1
    except ValueError:
        return False


class Mercenario(Guerrero):
    """A warrior who may trade damage for healing."""

    tipo = TipoPersonaje.MERCENARIO
    CURACION = 20

    def __init__(
        self,
        arma1=None,
        arma2=None,
        *,
        rng=None,
        decidir_curar: Callable[[], bool] | None = None,
    ) -> None:
        super().__init__(arma1, arma2, rng=rng)
        self.decidir_curar = _preguntar_curar if decidir_curar is None else decidir_curar

    def habilidad(self, enemigo: Personaje, arma: Arma) -> int:
        self._comprobar(enemigo, arma)
        dano_base = arma.dano
        reduccion = 0
        if self.decidir_curar():
            self.curar(self.CURACION)
            reduccion = int(dano_base * 0.3)
        total = max(dano_base - reduccion, 0)
        enemigo.recibir_dano(total)
        print(
            f"Daño base: {dano_base}, Daño reducido: {reduccion}, "
            f"Daño total: {total}"
        )
        return total


class Paladin(Guerrero):
    """A warrior who doubles the damage of a sword."""

    tipo = TipoPersonaje.PALADIN

    def habilidad(self, enemigo: Personaje, arma: Arma) -> int:
        self._comprobar(enemigo, arma)
        dano = arma.dano
        if not isinstance(arma, ArmaMagica) and arma.tipo_arma is TipoDeArma.ESPADA:
            dano *= 2
        enemigo.recibir_dano(dano)
        return dano