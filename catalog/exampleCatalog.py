from dataclasses import dataclass
import logging
import matplotlib.pyplot as plt
import numpy as np

from catalog.animalModel import Animal, Lion, Meerkat, Warthog
from catalog.familyModel import Child, Father, GrandParent, Mother, Parent
from catalog.vehicleModel import BlackpoolBeachDonkey, Car, Truck, Vehicle

logger = logging.getLogger(__name__)


"""
Builds one instance of every example type, invokes its behavior through the
base-type reference and collects the printed lines so they can be compared
against the literal output the tutorial documents.
"""

EXPECTED_OUTPUT = [
    "== Animals ==",
    "Lion says Roar! and runs at up to 80 km/h",
    "Warthog says Oink! Hakuna matata and runs at up to 48 km/h",
    "Meerkat says Chirp chirp! and runs at up to 32 km/h",
    "== Vehicles ==",
    "Car with 4 wheels says Brum brum! at up to 200 km/h",
    "Truck with 18 wheels says Honk honk! at up to 120 km/h",
    "BlackpoolBeachDonkey with 0 wheels says Hee-haw! at up to 24 km/h",
    "== Family ==",
    "Hello, I am Edna Smith",
    "Hello, I am Peter Smith, I work as a teacher",
    "Hi, I am Tom Smith from Blackpool, child of Mary and John",
    "Tom has green eyes and will grow to 1.85 m",
]


@dataclass(frozen=True)
class FamilyExample:
    grand_parent: GrandParent
    parent: Parent
    child: Child


class CatalogMismatchError(ValueError):
    def __init__(self, mismatches):
        self.mismatches = mismatches
        super().__init__(f"{len(mismatches)} line(s) differ from the documented output: {mismatches}")


def buildAnimals():
    animals: list[Animal] = [Lion(), Warthog(), Meerkat()]
    return animals


def buildVehicles():
    vehicles: list[Vehicle] = [Car(), Truck(), BlackpoolBeachDonkey()]
    return vehicles


def buildFamily():
    mother = Mother("Mary", eye_colour="green")
    father = Father("John", height=1.85)
    return FamilyExample(
        grand_parent=GrandParent("Edna"),
        parent=Parent("Peter"),
        child=Child("Tom", mother, father),
    )


def demonstrationLines():
    lines = ["== Animals =="]
    lines += [animal.describe() for animal in buildAnimals()]

    lines.append("== Vehicles ==")
    lines += [vehicle.describe() for vehicle in buildVehicles()]

    family = buildFamily()
    child = family.child
    lines.append("== Family ==")
    lines.append(family.grand_parent.greet())
    lines.append(family.parent.greet())
    lines.append(child.greet())
    lines.append(f"{child.name} has {child.eyeColour()} eyes and will grow to {child.height():g} m")
    return lines


def runDemonstration(write=print):
    lines = demonstrationLines()
    for line in lines:
        write(line)
    return lines


def compareOutput(lines, expected=None):
    """Compare produced lines with the documented ones.

    Returns a list of (index, expected, actual) tuples. A line present on
    only one side is reported with None on the other.
    """
    if expected is None:
        expected = EXPECTED_OUTPUT
    mismatches = []
    for i in range(max(len(lines), len(expected))):
        want = expected[i] if i < len(expected) else None
        got = lines[i] if i < len(lines) else None
        if want != got:
            mismatches.append((i, want, got))
    for i, want, got in mismatches:
        logger.warning("line %d: expected %r, got %r", i, want, got)
    return mismatches


def verifyDemonstration(lines=None):
    if lines is None:
        lines = demonstrationLines()
    mismatches = compareOutput(lines)
    if mismatches:
        raise CatalogMismatchError(mismatches)
    logger.info("all %d lines match the documented output", len(lines))
    return lines


def plotTopSpeeds(models, figsize=(8, 4)):
    """Horizontal bar chart of topSpeed() per model, slowest at the bottom.

    Works for any mix of animals and vehicles. Returns (fig, ax); call
    plt.show() yourself if you want a window.
    """
    names = [model.model_name for model in models]
    speeds = np.array([model.topSpeed() for model in models], dtype=float)
    order = np.argsort(speeds, kind="stable")

    fig, ax = plt.subplots(figsize=figsize, constrained_layout=True)
    positions = np.arange(len(models))
    ax.barh(positions, speeds[order], color="tab:blue")
    ax.set_yticks(positions)
    ax.set_yticklabels([names[i] for i in order])
    ax.set_xlabel('top speed in km/h')
    ax.set_title('Top speeds')
    return fig, ax


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    verifyDemonstration(runDemonstration())
