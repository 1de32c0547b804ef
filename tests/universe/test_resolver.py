"""Tests for target resolution."""

from unidiffs.core import TargetDescriptor
from unidiffs.universe import TargetResolver


def test_resolves_named_region(universe):
    resolver = TargetResolver(universe)

    assert resolver.resolve(TargetDescriptor.region("Gamma")) == universe.find_region("Gamma")
    assert resolver.universe is universe


def test_unknown_region_does_not_resolve(universe):
    assert TargetResolver(universe).resolve(TargetDescriptor.region("Nowhere")) is None


def test_unset_descriptor_never_resolves(universe):
    assert TargetResolver(universe).resolve(TargetDescriptor()) is None


def test_removed_region_does_not_resolve(universe):
    resolver = TargetResolver(universe)
    universe.remove_region("Delta")

    assert resolver.resolve(TargetDescriptor.region("Delta")) is None
