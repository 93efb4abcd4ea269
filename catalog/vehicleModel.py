from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
import logging

from catalog.animalModel import Animal, Donkey
from catalog.frozenModel import FrozenModel

logger = logging.getLogger(__name__)

DEFAULT_NOISE = "Brum brum!"


"""
Vehicle is the base type: top speed is a mandatory override,
the noise has a default ("Brum brum!") that derived vehicles may replace.
"""

@dataclass(frozen=True)
class VehicleConfig:
    wheels: int = 4
    top_speed: float = 0.0   # km/h
    max_riders: int = 1

    def __post_init__(self):
        if self.wheels < 0:
            raise ValueError(f"wheels must be non-negative, got {self.wheels}")
        if self.top_speed < 0:
            raise ValueError(f"top_speed must be non-negative, got {self.top_speed}")
        if self.max_riders < 0:
            raise ValueError(f"max_riders must be non-negative, got {self.max_riders}")


class Vehicle(FrozenModel, ABC):
    default_config = VehicleConfig()

    def __init__(self, model_config: Optional[VehicleConfig] = None):
        self._setFields(
            model_name=type(self).__name__,
            model_config=model_config if model_config is not None else self.default_config,
        )

    @abstractmethod
    def topSpeed(self):
        ...

    def makeNoise(self):
        return DEFAULT_NOISE

    def wheels(self):
        return self.model_config.wheels

    def describe(self):
        return f"{self.model_name} with {self.wheels()} wheels says {self.makeNoise()} at up to {self.topSpeed():g} km/h"

    def __repr__(self):
        return f"{self.model_name}({self.model_config!r})"


class Car(Vehicle):
    default_config = VehicleConfig(wheels=4, top_speed=200.0, max_riders=5)

    def topSpeed(self):
        return self.model_config.top_speed


class Truck(Vehicle):
    default_config = VehicleConfig(wheels=18, top_speed=120.0, max_riders=2)

    def topSpeed(self):
        return self.model_config.top_speed

    def makeNoise(self):
        return "Honk honk!"


class BlackpoolBeachDonkey(Vehicle):
    """A beach donkey carries riders like a vehicle but is still an animal.

    Rather than extending both Vehicle and Animal, it is a Vehicle holding
    an Animal as a named member. Noise, speed and species are delegated to
    that member.
    """
    default_config = VehicleConfig(wheels=0, max_riders=1)

    def __init__(self, animal: Optional[Animal] = None, model_config: Optional[VehicleConfig] = None):
        super().__init__(model_config)
        self._setFields(_animal=animal if animal is not None else Donkey())
        logger.debug("%s composed with %r", self.model_name, self._animal)

    @property
    def animal(self):
        return self._animal

    def species(self):
        return self._animal.species()

    def makeNoise(self):
        return self._animal.makeNoise()

    def topSpeed(self):
        return self._animal.topSpeed()

    def riders(self):
        return self.model_config.max_riders
