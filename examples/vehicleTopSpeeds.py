from dataclasses import replace
import logging
import os
import sys

local_path = os.path.dirname(os.path.realpath(__file__))
sys.path.append(os.path.join(local_path, ".."))

import catalog.animalModel as animalModel
import catalog.exampleCatalog as exampleCatalog
import catalog.vehicleModel as vehicleModel
import matplotlib.pyplot as plt

logging.basicConfig(level=logging.DEBUG)

vehicles = exampleCatalog.buildVehicles()
for vehicle in vehicles:
    print(vehicle.describe())

# the beach donkey is a Vehicle that holds a Donkey, not a subclass of both
donkey = animalModel.Donkey()
beach_donkey = vehicleModel.BlackpoolBeachDonkey(animal=donkey)
print(f"isinstance Vehicle: {isinstance(beach_donkey, vehicleModel.Vehicle)}")
print(f"isinstance Animal: {isinstance(beach_donkey, animalModel.Animal)}")
print(f"same donkey: {beach_donkey.animal is donkey}")
print(f"{beach_donkey.species()} carries {beach_donkey.riders()} rider(s)")

# configs are frozen, derive a faster car instead of mutating one
sports_car = vehicleModel.Car(replace(vehicleModel.Car.default_config, top_speed=300.0))
print(sports_car.describe())

# animals and vehicles share topSpeed(), so they fit on one chart
fig, ax = exampleCatalog.plotTopSpeeds(vehicles + exampleCatalog.buildAnimals() + [sports_car])
plt.show()
