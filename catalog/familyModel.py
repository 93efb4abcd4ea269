from dataclasses import dataclass
import logging
from typing import Optional

from catalog.frozenModel import FrozenModel

logger = logging.getLogger(__name__)


"""
GrandParent -> Parent -> Child: fields set once in GrandParent are inherited
two levels down, greet() is overridden at every level and chained via super().
Mother and Father are unrelated types, so Child holds one of each as a member.
"""

@dataclass(frozen=True)
class FamilyConfig:
    family_name: str = "Smith"
    home_town: str = "Blackpool"
    occupation: str = "teacher"

    def __post_init__(self):
        if not self.family_name:
            raise ValueError("family_name must not be empty")


@dataclass(frozen=True)
class Mother:
    name: str
    eye_colour: str = "brown"


@dataclass(frozen=True)
class Father:
    name: str
    height: float = 1.8   # m


class GrandParent(FrozenModel):
    def __init__(self, name: str, model_config: Optional[FamilyConfig] = None):
        model_config = model_config if model_config is not None else FamilyConfig()
        self._setFields(
            model_name=type(self).__name__,
            model_config=model_config,
            name=name,
            family_name=model_config.family_name,
            home_town=model_config.home_town,
        )

    def greet(self):
        return f"Hello, I am {self.name} {self.family_name}"


class Parent(GrandParent):
    def __init__(self, name: str, model_config: Optional[FamilyConfig] = None):
        super().__init__(name, model_config)
        self._setFields(occupation=self.model_config.occupation)

    def greet(self):
        return f"{super().greet()}, I work as a {self.occupation}"


class Child(Parent):
    """Third level of the chain, and the composition example.

    family_name and home_town come from GrandParent through Parent. The
    mother and father are held as named members and returned unchanged;
    eyeColour() and height() delegate to them.
    """

    def __init__(self, name: str, mother: Mother, father: Father, model_config: Optional[FamilyConfig] = None):
        super().__init__(name, model_config)
        self._setFields(_mother=mother, _father=father)
        logger.debug("%s composed with %r and %r", self.name, mother, father)

    @property
    def mother(self):
        return self._mother

    @property
    def father(self):
        return self._father

    def eyeColour(self):
        return self._mother.eye_colour

    def height(self):
        return self._father.height

    def greet(self):
        return f"Hi, I am {self.name} {self.family_name} from {self.home_town}, child of {self._mother.name} and {self._father.name}"
