# extension_exporter/core/manifest_reader.py
"""Read-only access to an extension's XML manifest"""

from typing import List, Optional, Union
from xml.etree import ElementTree as ET

from ..api.exceptions import ManifestError

ADMINISTRATION = "administration"


class ManifestReader:
    """Parsed view of an extension manifest

    Sections are addressed by element; ``None`` stands for the manifest
    root, which keeps lookups under ``<administration>`` symmetrical with
    top-level ones.
    """

    def __init__(self, root: ET.Element, source: Optional[str] = None):
        self.root = root
        self.source = source

    @classmethod
    def from_string(cls, content: Union[str, bytes], source: Optional[str] = None) -> 'ManifestReader':
        """Parse manifest from XML text"""
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            location = f" in {source}" if source else ""
            raise ManifestError(f"Invalid manifest{location}: {e}")
        return cls(root, source)

    @property
    def version(self) -> str:
        """Version string, empty if undeclared"""
        element = self.root.find("version")
        if element is None or element.text is None:
            return ""
        return element.text.strip()

    @property
    def administration(self) -> Optional[ET.Element]:
        """The administration section, if declared"""
        return self.root.find(ADMINISTRATION)

    def has_administration(self) -> bool:
        return self.administration is not None

    def get_section(self, tag: str, section: Optional[ET.Element] = None) -> Optional[ET.Element]:
        """Get a child element of section (manifest root by default)"""
        if section is None:
            section = self.root
        return section.find(tag)

    def has_section(self, tag: str, section: Optional[ET.Element] = None) -> bool:
        return self.get_section(tag, section) is not None

    def get_attribute(self,
                      section: Optional[ET.Element],
                      tag: str,
                      attribute: str,
                      default: str) -> str:
        """
        Safely get an attribute (or its default)

        The default applies when the tag is missing, when the attribute
        is missing and when the attribute is empty.

        Args:
            section: Parent element, None for the manifest root
            tag: Child element name
            attribute: Attribute name
            default: Fallback value

        Returns:
            Attribute value or default
        """
        element = self.get_section(tag, section)
        if element is None:
            return str(default)

        return element.get(attribute) or str(default)

    def get_language_entries(self, languages: Optional[ET.Element]) -> List[str]:
        """Get declared language file paths of a languages section, in order"""
        if languages is None:
            return []

        entries = []
        for element in languages.findall("language"):
            text = (element.text or "").strip()
            if text:
                entries.append(text)
        return entries
