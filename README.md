# arenarpg

arenarpg is a small role-playing combat model. It comes with three console commands built on it.

There are two families of characters, and each character has its own ability (`habilidad`):

- warriors (`arenarpg.personajes.Guerrero`, with 150 energy): `Barbaro`, `Caballero`,
  `Gladiador`, `Mercenario`, `Paladin` in `arenarpg.guerreros`
- mages (`arenarpg.personajes.Mago`, with 200 mana): `Brujo`, `Conjurador`, `Hechicero`,
  `Nigromante` in `arenarpg.magos`

There are also two families of weapons, both in `arenarpg.armas`:

- combat weapons (`ArmaCombate`): `Espada`, `HachaSimple`, `HachaDoble`, `Garrote`, `Lanza`
- magic weapons (`ArmaMagica`): `Amuleto`, `Baston`, `LibroDeHechizos`, `Pocion`

Every character starts with 100 life points, and `curar` never raises life above 100. A
character dies (`muerto`) when its life drops to zero or below. It carries at most two
weapons, and `equipar_arma` raises `ArmasCompletasError` when both hands are already full.

The enumerations `TipoDeArma`, `TipoPersonaje` and `ClaseArma` live in `arenarpg.tipos`.

## Installation

```
pip install .
```

The package needs nothing beyond the standard library.

## Commands

```
arenarpg-demo
```

This command creates a staff and a sword, a sorcerer and a barbarian. It prints each
weapon's stats, applies damage and healing to both characters, has each of them use its
ability on the other, and then tries the weapons' special abilities.

```
arenarpg-generador [--semilla N]
```

This command builds 3 to 7 random mages and 3 to 7 random warriors. Each of them carries
zero, one or two random weapons. It then lists every one of them with its weapons.
`--semilla` seeds the random generator so that a run can be repeated.

```
arenarpg-juego [--semilla N]
```

This command runs the interactive arena. You first pick a character (1–9) and then a
weapon (1–9). If either choice is invalid, the command prints an error and exits with
status 1. A random opponent holding a random weapon is then created. In each round you
choose Golpe Fuerte (1), Golpe Rápido (2) or Defensa y Golpe (3), and the opponent
chooses at random:

- Golpe Fuerte beats Golpe Rápido.
- Golpe Rápido beats Defensa y Golpe.
- Defensa y Golpe beats Golpe Fuerte.
- If both sides choose the same attack, nobody takes damage.

The winner of a round deals 10 points of damage. The game ends when either side has no
life left. `--semilla` seeds the opponent's choices.

## Using the library

`arenarpg.fabrica` builds weapons and characters from their enum members and gives
display names for them:

```python
from arenarpg.fabrica import crear_arma, crear_personaje, nombre_arma, nombre_personaje
from arenarpg.tipos import TipoDeArma, TipoPersonaje

espada = crear_arma(TipoDeArma.ESPADA)
paladin = crear_personaje(TipoPersonaje.PALADIN, espada, None)
print(nombre_personaje(paladin), nombre_arma(espada))   # Paladín Espada
```

Unknown kinds raise `ValueError`. The amulet reports its `tipo_arma` as
`TipoDeArma.BASTON`, so `nombre_arma` shows it as "Bastón".

`ataque_especial` on a combat weapon and `habilidad_magica` on a magic weapon take an
optional `rng`. Pass a seeded `random.Random` to get reproducible results:

```python
import random
from arenarpg.armas import Espada

print(Espada().ataque_especial(random.Random(7)))
```

Characters accept an `rng` keyword as well. Two abilities normally ask a question on the
terminal, and each can be given a function that answers it instead:

- `Mercenario(..., decidir_curar=lambda: True)` heals 20 and deals 30% less damage.
- `Brujo(..., elegir_efecto=lambda: 1)` picks the potion effect: 1 for extra damage, 2
  for healing, 3 for mana. Any other choice raises `ValueError`.

Abilities raise `ValueError` when the enemy or the weapon is `None`. `Barbaro` (with a
combat weapon) and `Caballero` raise `EnergiaInsuficienteError` when the warrior lacks
the weapon's attack cost in energy.

`arenarpg.generador` offers `generar_configuracion`, `generar_arma_aleatoria`,
`generar_mago_aleatorio`, `generar_guerrero_aleatorio` and `generar_ejercito`.
`arenarpg.demo.ejecutar_demo(rng, escribir)` runs the walk-through with any output
function.

A single round of the arena can be resolved without the console:

```python
from arenarpg.juego import Ataque, crear_personaje_jugador, resolver_ronda

jugador = crear_personaje_jugador(1, 1)   # Bárbaro armed with an Espada
rival = crear_personaje_jugador(6, 6)     # Hechicero armed with a Bastón
herido = resolver_ronda(jugador, rival, Ataque.GOLPE_FUERTE, Ataque.GOLPE_RAPIDO)
print(herido is rival, rival.vida)        # True 90
```

`resolver_ronda` prints the round and returns the character that took damage, or `None`
when both sides chose the same attack.

## What it does not do

The game runs only on the console for a single player against a random opponent. It keeps
no state between runs, with no saved games or scores. In the arena, weapons and character
abilities do not change the damage of a round, which is always 10.

## Running the tests

```
pip install .[test]
pytest
```