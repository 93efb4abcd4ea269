from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from catalog.frozenModel import FrozenModel


"""
Animal is the base type: species and noise are mandatory overrides and come
from the concrete class, top speed has a usable default that derived animals
may replace.
"""

@dataclass(frozen=True)
class AnimalConfig:
    top_speed: float = 0.0   # km/h
    legs: int = 4
    burst_only: bool = False

    def __post_init__(self):
        if self.top_speed < 0:
            raise ValueError(f"top_speed must be non-negative, got {self.top_speed}")
        if self.legs < 0:
            raise ValueError(f"legs must be non-negative, got {self.legs}")


class Animal(FrozenModel, ABC):
    default_config = AnimalConfig()

    def __init__(self, model_config: Optional[AnimalConfig] = None):
        self._setFields(
            model_name=type(self).__name__,
            model_config=model_config if model_config is not None else self.default_config,
        )

    @abstractmethod
    def species(self):
        ...

    @abstractmethod
    def makeNoise(self):
        ...

    def topSpeed(self):
        return self.model_config.top_speed

    def legs(self):
        return self.model_config.legs

    def describe(self):
        return f"{self.species()} says {self.makeNoise()} and runs at up to {self.topSpeed():g} km/h"

    def __repr__(self):
        return f"{self.model_name}({self.model_config!r})"


class Lion(Animal):
    default_config = AnimalConfig(top_speed=80.0)

    def species(self):
        return "Lion"

    def makeNoise(self):
        return "Roar!"


class Warthog(Animal):
    default_config = AnimalConfig(top_speed=48.0)

    def species(self):
        return "Warthog"

    def makeNoise(self):
        return "Oink! Hakuna matata"


class Meerkat(Animal):
    default_config = AnimalConfig(top_speed=64.0, burst_only=True)

    def species(self):
        return "Meerkat"

    def makeNoise(self):
        return "Chirp chirp!"

    def topSpeed(self):
        # meerkats only hold top speed for short bursts, report half of it
        if self.model_config.burst_only:
            return 0.5 * self.model_config.top_speed
        return super().topSpeed()


class Donkey(Animal):
    default_config = AnimalConfig(top_speed=24.0)

    def species(self):
        return "Donkey"

    def makeNoise(self):
        return "Hee-haw!"
