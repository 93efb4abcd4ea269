import pytest

from catalog import exampleCatalog
from catalog.animalModel import Lion, Meerkat, Warthog
from catalog.vehicleModel import BlackpoolBeachDonkey, Car, Truck


def test_build_order():
    assert [type(a) for a in exampleCatalog.buildAnimals()] == [Lion, Warthog, Meerkat]
    assert [type(v) for v in exampleCatalog.buildVehicles()] == [Car, Truck, BlackpoolBeachDonkey]


def test_build_family():
    family = exampleCatalog.buildFamily()
    assert family.child.mother.name == "Mary"
    assert family.child.father.name == "John"
    assert family.parent.name == "Peter"
    assert family.parent is not family.child.father


def test_demonstration_matches_documented_output():
    assert exampleCatalog.demonstrationLines() == exampleCatalog.EXPECTED_OUTPUT


def test_run_demonstration_writes_every_line():
    written = []
    lines = exampleCatalog.runDemonstration(write=written.append)
    assert written == lines == exampleCatalog.EXPECTED_OUTPUT


def test_run_demonstration_prints(capsys):
    exampleCatalog.runDemonstration()
    out = capsys.readouterr().out.splitlines()
    assert out == exampleCatalog.EXPECTED_OUTPUT


def test_compare_output_reports_changed_and_missing_lines():
    lines = list(exampleCatalog.EXPECTED_OUTPUT)
    lines[1] = "Lion says Meow"
    lines.pop()
    mismatches = exampleCatalog.compareOutput(lines)
    assert mismatches == [
        (1, exampleCatalog.EXPECTED_OUTPUT[1], "Lion says Meow"),
        (len(lines), exampleCatalog.EXPECTED_OUTPUT[-1], None),
    ]


def test_compare_output_reports_extra_lines():
    assert exampleCatalog.compareOutput(["a", "b"], expected=["a"]) == [(1, None, "b")]


def test_verify_demonstration():
    assert exampleCatalog.verifyDemonstration() == exampleCatalog.EXPECTED_OUTPUT
    with pytest.raises(exampleCatalog.CatalogMismatchError) as e:
        exampleCatalog.verifyDemonstration(["== Animals =="])
    assert isinstance(e.value, ValueError)
    assert len(e.value.mismatches) == len(exampleCatalog.EXPECTED_OUTPUT) - 1


def test_plot_top_speeds_sorted():
    models = exampleCatalog.buildAnimals() + exampleCatalog.buildVehicles()
    fig, ax = exampleCatalog.plotTopSpeeds(models)
    labels = [t.get_text() for t in ax.get_yticklabels()]
    assert labels == ["BlackpoolBeachDonkey", "Meerkat", "Warthog", "Lion", "Truck", "Car"]
    widths = [bar.get_width() for bar in ax.patches]
    assert widths == sorted(widths)
    assert fig is ax.figure
