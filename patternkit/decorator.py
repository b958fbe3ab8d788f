"""Characters whose abilities grow by stacking power-up decorators."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Character(ABC):
    """A game character that can describe its abilities."""

    @abstractmethod
    def abilities(self) -> str:
        """Return a description of the character's abilities."""


class Mario(Character):
    """The plain base character."""

    def abilities(self) -> str:
        return "Mario"


class CharacterDecorator(Character, ABC):
    """A character that wraps another character and extends it."""

    def __init__(self, character: Character) -> None:
        self._character = character


class HeightUp(CharacterDecorator):
    """Adds extra height."""

    def abilities(self) -> str:
        return self._character.abilities() + " with HeightUp"


class GunPowerUp(CharacterDecorator):
    """Adds a gun."""

    def abilities(self) -> str:
        return self._character.abilities() + " with Gun"


class StarPowerUp(CharacterDecorator):
    """Adds time-limited star power."""

    def abilities(self) -> str:
        return self._character.abilities() + " with Start Power (Limited Time)"


def main(argv: list[str] | None = None) -> int:
    """Build a character step by step and print its abilities."""
    del argv
    out = sys.stdout
    mario: Character = Mario()
    print(f"Basic Character: {mario.abilities()}", file=out)

    mario = HeightUp(mario)
    print(f"After HeightUp: {mario.abilities()}", file=out)

    mario = GunPowerUp(mario)
    print(f"After GunPowerUp: {mario.abilities()}", file=out)

    mario = StarPowerUp(mario)
    print(f"After StartPowerUp: {mario.abilities()}", file=out)

    del mario
    print("Destroying StartPowerUp Decorator", file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())