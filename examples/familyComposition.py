import logging
import os
import sys

local_path = os.path.dirname(os.path.realpath(__file__))
sys.path.append(os.path.join(local_path, ".."))

import catalog.exampleCatalog as exampleCatalog
import catalog.familyModel as familyModel

logging.basicConfig(level=logging.DEBUG)

family = exampleCatalog.buildFamily()
child = family.child

# fields set in GrandParent reach Child through Parent
print(f"{child.name}: family_name={child.family_name}, home_town={child.home_town}")
print([cls.__name__ for cls in familyModel.Child.__mro__])

# greet() overridden at every level
for member in (family.grand_parent, family.parent, child):
    print(f"{member.model_name}: {member.greet()}")

# mother and father are held, not inherited
print(f"mother: {child.mother}, father: {child.father}")
print(f"eyes from mother: {child.eyeColour()}, height from father: {child.height():g} m")

# the whole catalog, checked against the documented output
exampleCatalog.verifyDemonstration(exampleCatalog.runDemonstration())
