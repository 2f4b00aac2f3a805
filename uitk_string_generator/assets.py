"""
Asset access boundary.

The generator never opens files or parses XML itself; it asks an
``AssetSource`` for text and for a parsed markup tree. The file system
implementation below is what the CLI uses; tests and other hosts can pass
their own.
"""

import logging
from pathlib import Path
from typing import Protocol
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from .constants import Emission
from .exceptions import AssetLoadError


logger = logging.getLogger(__name__)


class AssetSource(Protocol):
    """Capability the generator needs from its host."""

    def read_asset_text(self, path: str) -> str:
        """Return the full text content of the asset at ``path``."""
        ...

    def parse_markup(self, text: str) -> Element:
        """Parse UXML text into its root element."""
        ...


class FileSystemAssetSource:
    """Reads assets from disk and parses UXML with ElementTree."""

    def __init__(self, encoding: str = Emission.ENCODING):
        self.encoding = encoding

    def read_asset_text(self, path: str) -> str:
        asset_path = Path(path)
        try:
            # utf-8-sig drops the BOM Unity sometimes writes
            encoding = "utf-8-sig" if self.encoding.lower() in ("utf-8", "utf8") else self.encoding
            text = asset_path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise AssetLoadError(f"Could not read asset '{path}': {e}", asset_path=str(path)) from e
        logger.debug(f"Read {len(text)} characters from {asset_path}")
        return text

    def parse_markup(self, text: str) -> Element:
        try:
            return ElementTree.fromstring(text)
        except ElementTree.ParseError as e:
            raise AssetLoadError(
                f"Markup is not well-formed XML: {e}",
                context={"line": e.position[0], "column": e.position[1]},
            ) from e
