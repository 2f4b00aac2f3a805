import logging
from pathlib import Path
from typing import Dict, Iterable, Union

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
)

from uitk_string_generator.constants import Emission
from uitk_string_generator.domain.models import GenerationRequest, NameValueEntry
from uitk_string_generator.exceptions import GeneratedFileWriteError


logger = logging.getLogger(__name__)

# Define the path to the templates directory relative to this file
TEMPLATE_DIR = Path(__file__).parent / "templates"

_CSHARP_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}

# Not allowed raw inside a C# regular string literal
_CSHARP_LINE_BREAKS = "\u0085\u2028\u2029"


def csharp_string_literal(value: str) -> str:
    """
    Render ``value`` as a double-quoted C# regular string literal.

    Backslashes, quotes and the named control characters use their short
    escapes; any other control character becomes ``\\uXXXX``.
    """
    escaped = []
    for ch in value:
        if ch in _CSHARP_ESCAPES:
            escaped.append(_CSHARP_ESCAPES[ch])
        elif ord(ch) < 0x20 or ch in _CSHARP_LINE_BREAKS:
            escaped.append(f"\\u{ord(ch):04x}")
        else:
            escaped.append(ch)
    return '"' + "".join(escaped) + '"'


def setup_jinja_env() -> Environment:
    """Sets up and returns the Jinja2 environment for C# emission."""
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=False,  # C# output; literals are escaped by csharp_string
        trim_blocks=True,  # Remove first newline after a block tag
        lstrip_blocks=True,  # Strip leading whitespace from lines with block tags
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["csharp_string"] = csharp_string_literal
    return env


def render_class(
    namespace_name: str,
    class_name: str,
    entries: Union[Dict[str, str], Iterable[NameValueEntry]],
    env: Environment = None,
) -> str:
    """
    Render the generated C# source for one static class.

    ``entries`` is either an ordered identifier -> value mapping or a sequence
    of ``NameValueEntry``; field order follows it.
    """
    if isinstance(entries, dict):
        entries = [NameValueEntry(identifier, value) for identifier, value in entries.items()]
    env = env or setup_jinja_env()
    template = env.get_template(Emission.TEMPLATE_NAME)
    return template.render(
        provenance=Emission.PROVENANCE_COMMENT,
        namespace_name=namespace_name,
        class_name=class_name,
        entries=list(entries),
    )


def render_request(request: GenerationRequest, env: Environment = None) -> str:
    """Render the class described by a ``GenerationRequest``."""
    return render_class(request.namespace_name, request.class_name, request.entries, env=env)


def write_generated_file(
    output_directory: str,
    class_name: str,
    content: str,
    file_extension: str = ".cs",
) -> Path:
    """
    Write ``content`` to ``<output_directory>/<class_name><file_extension>``.

    The directory is created when missing and an existing file is overwritten.

    Raises:
        GeneratedFileWriteError: If the directory or the file cannot be written
    """
    output_path = Path(output_directory) / f"{class_name}{file_extension}"
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps "\n" line endings on every platform
        with open(output_path, "w", encoding=Emission.ENCODING, newline="") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Error writing generated file '{output_path}': {e}")
        raise GeneratedFileWriteError(
            f"Could not write generated file: {e}", output_path=str(output_path)
        ) from e

    logger.debug(f"Generated file: {output_path}")
    return output_path
