"""Unit tests for the in-memory LocalUniverse."""

import pytest

from unidiffs.universe import GeneratorEntry, GeneratorRegistry, LocalUniverse, Universe


def test_local_universe_satisfies_both_protocols(universe):
    assert isinstance(universe, Universe)
    assert isinstance(universe, GeneratorRegistry)


def test_add_region_rejects_duplicate_name(universe):
    with pytest.raises(ValueError, match="already exists"):
        universe.add_region("Gamma")


def test_find_region_returns_handle_or_none(universe):
    assert universe.find_region("Gamma") is not None
    assert universe.find_region("Nowhere") is None


def test_add_member_fails_when_already_present(universe):
    gamma = universe.find_region("Gamma")

    assert universe.add_member(gamma, "Outpost")
    assert not universe.add_member(gamma, "Outpost")
    assert universe.members("Gamma") == ("Gamma Prime", "Outpost")


def test_remove_member_fails_when_absent(universe):
    gamma = universe.find_region("Gamma")

    assert universe.remove_member(gamma, "Gamma Prime")
    assert not universe.remove_member(gamma, "Gamma Prime")
    assert universe.members("Gamma") == ()


def test_generator_entries_are_keyed_by_ref_and_chance(universe):
    gamma = universe.find_region("Gamma")
    pirates = universe.get_generator("Pirates")

    assert universe.add_generator(gamma, pirates, 30)
    assert not universe.add_generator(gamma, pirates, 30)
    assert universe.add_generator(gamma, pirates, 40), "Different chance is a different entry"

    assert not universe.remove_generator(gamma, pirates, 10)
    assert universe.remove_generator(gamma, pirates, 30)
    assert universe.generators("Gamma") == (GeneratorEntry(pirates, 40),)


def test_register_generator_is_idempotent(universe):
    first = universe.register_generator("Pirates")
    second = universe.register_generator("Pirates")

    assert first is second
    assert universe.get_generator("Unknown") is None


def test_mutations_on_stale_region_handle_fail():
    universe = LocalUniverse()
    region = universe.add_region("Temp")
    universe.remove_region("Temp")
    replacement = universe.add_region("Other")

    assert replacement.index == region.index
    assert not universe.add_member(region, "Outpost")
    assert universe.members("Other") == ()


def test_remove_region_reports_existence(universe):
    assert universe.remove_region("Gamma")
    assert not universe.remove_region("Gamma")
    assert list(universe.regions()) == ["Delta"]


def test_inspection_of_unknown_region_is_empty(universe):
    assert universe.members("Nowhere") == ()
    assert universe.generators("Nowhere") == ()


def test_snapshot_ignores_insertion_order(universe):
    gamma = universe.find_region("Gamma")
    before = universe.snapshot()

    universe.remove_member(gamma, "Gamma Prime")
    universe.add_member(gamma, "Outpost")
    universe.add_member(gamma, "Gamma Prime")
    universe.remove_member(gamma, "Outpost")

    assert universe.snapshot() == before
    assert before["Delta"] == {"members": ["Delta Station"], "generators": [("Traders", 50)]}
