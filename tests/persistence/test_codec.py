"""Tests for saving and loading the applied diff names."""

import xml.etree.ElementTree as ET

import pytest

from unidiffs import DiffStack, SaveMalformedError, XmlCatalog
from unidiffs.persistence import dumps, load_diffs, loads, read_diffs, save_diffs


def test_save_diffs_writes_names_in_stack_order(stack):
    stack.apply("D2")
    stack.apply("D1")

    element = save_diffs(stack)

    assert element.tag == "diffs"
    assert [child.tag for child in element] == ["diff", "diff"]
    assert [child.text for child in element] == ["D2", "D1"]


def test_save_diffs_appends_to_parent(stack):
    root = ET.Element("player")
    stack.apply("D1")

    save_diffs(stack, root)

    assert ET.tostring(root, encoding="unicode") == "<player><diffs><diff>D1</diff></diffs></player>"


def test_save_empty_stack(stack):
    assert dumps(stack) == "<diffs />"


def test_read_diffs_scans_every_diffs_child():
    root = ET.fromstring(
        "<save><player/><diffs><diff>D1</diff></diffs>"
        "<diffs><diff>D2</diff><diff/><note>x</note></diffs></save>"
    )

    assert read_diffs(root) == ["D1", "D2"]


def test_read_diffs_keeps_names_as_written():
    root = ET.fromstring("<diffs><diff> Padded </diff><diff>D1</diff></diffs>")

    assert read_diffs(root) == [" Padded ", "D1"]


def test_read_diffs_accepts_diffs_element():
    assert read_diffs(ET.fromstring("<diffs><diff>D3</diff></diffs>")) == ["D3"]


def test_load_diffs_restores_stack(stack, universe):
    stack.apply("D3")
    root = ET.fromstring("<save><diffs><diff>D1</diff><diff>D2</diff></diffs></save>")

    names = load_diffs(stack, root)

    assert names == ["D1", "D2"]
    assert stack.names == ["D1", "D2"]
    assert universe.generators("Gamma") == ()


def test_dumps_loads_reproduces_membership(stack):
    stack.apply("D1")
    stack.apply("D2")
    saved = dumps(stack)
    stack.clear()

    loads(stack, saved)

    assert stack.names == ["D1", "D2"]


def test_dumps_loads_keeps_padded_names(universe, settings):
    catalog = XmlCatalog.from_string(
        '<unidiffs><unidiff name=" Padded "><system name="Gamma">'
        '<planet name="Outpost">add</planet>'
        "</system></unidiff></unidiffs>"
    )
    stack = DiffStack(universe, catalog, settings=settings)
    stack.apply(" Padded ")
    saved = dumps(stack)
    stack.clear()

    loads(stack, saved)

    assert saved == "<diffs><diff> Padded </diff></diffs>"
    assert stack.names == [" Padded "]
    assert "Outpost" in universe.members("Gamma")


@pytest.mark.parametrize("text", ["", "<diffs><diff>D1</diffs>"])
def test_loads_malformed_save_raises(stack, text):
    stack.apply("D1")

    with pytest.raises(SaveMalformedError, match="Malformed saved unidiffs"):
        loads(stack, text)

    assert stack.names == ["D1"]
