"""
Core domain models for the UI Toolkit string generator.

All of these are built fresh for one generation run and discarded once the
output file has been written.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple


class GenerationTarget(Enum):
    """The two independent outputs of a generation run."""

    STYLESHEET = "stylesheet"
    MARKUP = "markup"


@dataclass(frozen=True)
class NameValueEntry:
    """A unique constant identifier and the verbatim string it holds."""

    identifier: str
    value: str


@dataclass(frozen=True)
class GenerationRequest:
    """
    Everything needed to render and write one generated class.

    Entries keep their order; that order is the field order of the emitted
    class.
    """

    namespace_name: str
    class_name: str
    entries: Tuple[NameValueEntry, ...]
    max_identifier_length: int
    output_directory: str
    file_extension: str = ".cs"

    @classmethod
    def from_mapping(
        cls,
        namespace_name: str,
        class_name: str,
        mapping: Dict[str, str],
        max_identifier_length: int,
        output_directory: str,
        file_extension: str = ".cs",
    ) -> "GenerationRequest":
        """Build a request from an ordered identifier -> value mapping."""
        return cls(
            namespace_name=namespace_name,
            class_name=class_name,
            entries=tuple(NameValueEntry(k, v) for k, v in mapping.items()),
            max_identifier_length=max_identifier_length,
            output_directory=output_directory,
            file_extension=file_extension,
        )

    @property
    def output_path(self) -> Path:
        return Path(self.output_directory) / f"{self.class_name}{self.file_extension}"

    def as_mapping(self) -> Dict[str, str]:
        return {entry.identifier: entry.value for entry in self.entries}


@dataclass
class GenerationResult:
    """
    Outcome of generating one target.

    Exactly one of ``output_path`` / ``error`` is set for a finished target;
    preview runs leave ``output_path`` unset and carry the rendered ``code``.
    """

    target: GenerationTarget
    source_path: str
    class_name: Optional[str] = None
    output_path: Optional[Path] = None
    code: Optional[str] = None
    constants: Dict[str, str] = field(default_factory=dict)
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def constant_count(self) -> int:
        return len(self.constants)
