import logging
import os
import sys

local_path = os.path.dirname(os.path.realpath(__file__))
sys.path.append(os.path.join(local_path, ".."))

import catalog.animalModel as animalModel
import catalog.exampleCatalog as exampleCatalog
import matplotlib.pyplot as plt

logging.basicConfig(level=logging.INFO)

# every instance is held through an Animal reference, the noise still
# comes from the concrete type
animals: list[animalModel.Animal] = exampleCatalog.buildAnimals()
for animal in animals:
    print(f"{animal.model_name}: {animal.makeNoise()}")

# Meerkat overrides topSpeed(), Lion and Warthog keep the default
for animal in animals:
    overridden = type(animal).topSpeed is not animalModel.Animal.topSpeed
    print(f"{animal.model_name}: {animal.topSpeed():g} km/h (overridden: {overridden})")

# a class that skips a mandatory override cannot be instantiated
class Hyena(animalModel.Animal):
    def species(self):
        return "Hyena"

try:
    Hyena()
except TypeError as e:
    print(f"Hyena: {e}")

fig, ax = exampleCatalog.plotTopSpeeds(animals)
plt.show()
