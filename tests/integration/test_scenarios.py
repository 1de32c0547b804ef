"""End-to-end diff scenarios: catalog to universe and back."""

from structlog.testing import capture_logs

from unidiffs import DiffStack, HunkKind, XmlCatalog
from unidiffs.persistence import dumps, loads


def test_duplicate_add_partially_fails(stack, universe):
    """D1 adds Outpost twice: the first lands, the second fails, the diff is pushed."""
    with capture_logs() as logs:
        record = stack.apply("D1")

    assert universe.members("Gamma") == ("Gamma Prime", "Outpost")
    assert len(record.applied) == 1
    assert len(record.failed) == 1
    assert stack.is_applied("D1")

    failure_lines = [e["event"] for e in logs if e["log_level"] == "info"]
    assert failure_lines == ["Unidiff failed hunks", "[Gamma] planet add: 'Outpost'"]


def test_removing_d1_reverts_the_applied_hunk(stack, universe):
    stack.apply("D1")

    stack.remove("D1")

    assert universe.members("Gamma") == ("Gamma Prime",)
    assert not stack.is_applied("D1")


def test_persist_and_restore_reproduce_membership(stack, universe, catalog, settings):
    stack.apply("D1")
    stack.apply("D2")
    names = stack.persist()
    assert names == ["D1", "D2"]

    stack.clear()
    fresh = DiffStack(universe, catalog, settings=settings)
    fresh.restore(names)

    assert fresh.names == ["D1", "D2"]
    assert [h.kind for h in fresh.get("D2").applied] == [
        HunkKind.PLANET_REMOVE,
        HunkKind.GENERATOR_ADD,
    ]


def test_restore_follows_current_catalog(tmp_path, universe, settings):
    """Only names are saved; content comes from the catalog at load time."""
    path = tmp_path / "unidiff.xml"
    path.write_text(
        '<unidiffs><unidiff name="Expansion"><system name="Gamma">'
        '<planet name="Outpost">add</planet></system></unidiff></unidiffs>',
        encoding="utf-8",
    )
    stack = DiffStack(universe, XmlCatalog(path), settings=settings)
    stack.apply("Expansion")
    saved = dumps(stack)
    stack.clear()

    path.write_text(
        '<unidiffs><unidiff name="Expansion"><system name="Gamma">'
        '<planet name="Shipyard">add</planet></system></unidiff></unidiffs>',
        encoding="utf-8",
    )
    loads(stack, saved)

    assert stack.names == ["Expansion"]
    assert universe.members("Gamma") == ("Gamma Prime", "Shipyard")


def test_lifo_clear_restores_pristine_universe(stack, universe):
    pristine = universe.snapshot()
    stack.apply("D2")
    stack.apply("D3")
    stack.apply("Rebuild")

    stack.clear()

    assert universe.snapshot() == pristine
