"""Save-game codec for the diff stack.

Only diff names are written. On load the stack is cleared and each name is
re-applied from the catalog, so restored content follows the current catalog.

Format:
    <diffs>
      <diff>D1</diff>
      <diff>D2</diff>
    </diffs>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from unidiffs.diff.errors import SaveMalformedError

if TYPE_CHECKING:
    from unidiffs.stack import DiffStack

DIFFS_TAG = "diffs"
DIFF_TAG = "diff"


def save_diffs(stack: DiffStack, parent: ET.Element | None = None) -> ET.Element:
    """Write the applied diff names as a <diffs> element.

    Args:
        stack: Stack to save.
        parent: Save root to append to; a detached element is built when None.

    Returns:
        The <diffs> element.
    """
    diffs = ET.Element(DIFFS_TAG) if parent is None else ET.SubElement(parent, DIFFS_TAG)
    for name in stack.persist():
        ET.SubElement(diffs, DIFF_TAG).text = name
    return diffs


def read_diffs(parent: ET.Element) -> list[str]:
    """Collect diff names from a save root or a <diffs> element itself.

    Every <diffs> child of parent is read, in document order. Names are kept
    exactly as written; empty <diff> entries are ignored.
    """
    containers = [parent] if parent.tag == DIFFS_TAG else parent.findall(DIFFS_TAG)
    return [
        name
        for container in containers
        for node in container.findall(DIFF_TAG)
        if (name := node.text)
    ]


def load_diffs(stack: DiffStack, parent: ET.Element) -> list[str]:
    """Restore the stack from a save root.

    Returns:
        Names read from the save, whether or not each one re-applied.
    """
    names = read_diffs(parent)
    stack.restore(names)
    return names


def dumps(stack: DiffStack) -> str:
    """Serialize applied diff names to an XML string."""
    return ET.tostring(save_diffs(stack), encoding="unicode")


def loads(stack: DiffStack, text: str) -> list[str]:
    """Restore the stack from an XML string produced by dumps().

    Raises:
        SaveMalformedError: If text is not well-formed XML. The stack is untouched.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise SaveMalformedError(f"Malformed saved unidiffs: {e}") from e
    return load_diffs(stack, root)
