"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from unidiffs import DiffSettings, DiffStack, LocalUniverse, XmlCatalog

CATALOG_XML = """\
<unidiffs>
  <unidiff name="D1">
    <system name="Gamma">
      <planet name="Outpost">add</planet>
      <planet name="Outpost">add</planet>
    </system>
  </unidiff>
  <unidiff name="D2">
    <system name="Delta">
      <planet name="Delta Station">remove</planet>
      <fleet name="Pirates" chance="30">add</fleet>
    </system>
  </unidiff>
  <unidiff name="D3">
    <system name="Gamma">
      <fleet name="Traders" chance="20">add</fleet>
    </system>
    <system name="Delta">
      <fleet name="Traders" chance="50">remove</fleet>
    </system>
  </unidiff>
  <unidiff name="Rebuild">
    <system name="Gamma">
      <planet name="Gamma Prime">remove</planet>
      <planet name="Gamma Prime">add</planet>
    </system>
  </unidiff>
  <unidiff name="Broken">
    <system name="Nowhere">
      <planet name="Lost">add</planet>
    </system>
    <system name="Gamma">
      <planet name="Shiny">explode</planet>
      <fleet name="Ghosts" chance="10">add</fleet>
      <fleet name="Traders" chance="lots">add</fleet>
      <planet name="Shiny">add</planet>
    </system>
  </unidiff>
</unidiffs>
"""


def make_universe() -> LocalUniverse:
    """Universe matching CATALOG_XML: two regions and two generators."""
    universe = LocalUniverse()
    universe.register_generator("Pirates")
    traders = universe.register_generator("Traders")
    universe.add_region("Gamma", members=["Gamma Prime"])
    universe.add_region(
        "Delta",
        members=["Delta Station"],
        generators=[(traders, 50)],
    )
    return universe


@pytest.fixture
def universe():
    """Fresh LocalUniverse with Gamma and Delta regions."""
    return make_universe()


@pytest.fixture(scope="session")
def universe_factory():
    """Builds fresh universes inside property tests (one per example)."""
    return make_universe


@pytest.fixture
def catalog():
    """In-memory catalog of test diffs."""
    return XmlCatalog.from_string(CATALOG_XML)


@pytest.fixture
def settings():
    """Explicit settings so environment variables never leak into tests."""
    return DiffSettings(catalog_path="unused.xml", revert_order="reverse", report_failures=True)


@pytest.fixture
def stack(universe, catalog, settings):
    """Empty DiffStack over the test universe and catalog."""
    return DiffStack(universe, catalog, settings=settings)
