"""Tree reader over the XML model dump produced by the Gradle init script."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from gradlesync.contracts.exceptions import ModelLoadError
from gradlesync.contracts.tree import TreeReader


def _local_name(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


class XmlTreeReader(TreeReader[ET.Element]):
    """Namespace-agnostic :class:`TreeReader` backed by ``xml.etree.ElementTree``."""

    def parse(self, raw: str) -> ET.Element:
        try:
            return ET.fromstring(raw)
        except ET.ParseError as exc:
            raise ModelLoadError(f"malformed effective build XML: {exc}", location="<document>") from exc

    def single_child(self, node: ET.Element, name: str) -> ET.Element | None:
        for child in node:
            if _local_name(child.tag) == name:
                return child
        return None

    def repeated_children(self, node: ET.Element, name: str) -> list[ET.Element]:
        return [child for child in node if _local_name(child.tag) == name]

    def text(self, node: ET.Element) -> str:
        return "".join(node.itertext())
