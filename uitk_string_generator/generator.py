"""
Generation orchestrator.

Ties extraction, naming, de-duplication, emission and writing together for
the two independent targets: the ``<Name>Classes`` class built from a USS
stylesheet and the ``<Name>Strings`` class built from a UXML document.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from inflect import engine as inflect_engine
from jinja2 import Environment

from uitk_string_generator.assets import AssetSource, FileSystemAssetSource
from uitk_string_generator.codegen import render_request, setup_jinja_env, write_generated_file
from uitk_string_generator.colored_logging import log_highlight, log_progress, log_success
from uitk_string_generator.constants import ClassNaming, DefaultConfig
from uitk_string_generator.domain import (
    GenerationRequest,
    GenerationResult,
    GenerationTarget,
    assign_unique,
    distinct,
    make_identifier,
    sanitize_free_text,
)
from uitk_string_generator.exceptions import StringGeneratorError, raise_configuration_error
from uitk_string_generator.extraction import extract_element_names, extract_style_class_names


logger = logging.getLogger(__name__)

_INFLECT_ENGINE_ = inflect_engine()


# --- Naming of generated classes ---

def stylesheet_class_name(asset_name: str) -> str:
    """``MainMenuSS`` -> ``MainMenuClasses``; ``MainMenu`` -> ``MainMenuClasses``."""
    if asset_name.endswith(ClassNaming.STYLESHEET_MARKER):
        asset_name = asset_name[:-len(ClassNaming.STYLESHEET_MARKER)]
    return sanitize_free_text(f"{asset_name}{ClassNaming.STYLESHEET_SUFFIX}")


def markup_class_name(asset_name: str) -> str:
    """``MainMenu`` -> ``MainMenuStrings``."""
    return sanitize_free_text(f"{asset_name}{ClassNaming.MARKUP_SUFFIX}")


def resolve_namespace(raw_namespace: Optional[str]) -> str:
    """Sanitize a user supplied namespace, falling back to the default when nothing is left."""
    return sanitize_free_text(raw_namespace or "", allow_periods=True) or DefaultConfig.NAMESPACE


def build_constants(raw_names: Iterable[str], max_identifier_length: int) -> Dict[str, str]:
    """
    Turn harvested names into an ordered identifier -> value mapping.

    Exact duplicates collapse first; names that still collide after
    normalization get numeric suffixes.
    """
    candidates = [
        (make_identifier(raw_name, max_identifier_length), raw_name)
        for raw_name in distinct(raw_names)
    ]
    return assign_unique(candidates)


def validate_class_names(namespace_name: str, class_name: str) -> None:
    """
    Raises:
        ConfigurationError: If the namespace or class name is blank
    """
    if not namespace_name or not namespace_name.strip():
        raise_configuration_error("Namespace must be provided.", context={"class_name": class_name})
    if not class_name or not class_name.strip():
        raise_configuration_error("Class name must be provided.", context={"namespace": namespace_name})


def build_request(
    namespace_name: str,
    class_name: str,
    raw_names: Iterable[str],
    max_identifier_length: int,
    output_directory: str,
    file_extension: str = DefaultConfig.FILE_EXTENSION,
) -> GenerationRequest:
    """
    Validate the names of the generated class and build its request.

    Raises:
        ConfigurationError: If the namespace or class name is blank
    """
    validate_class_names(namespace_name, class_name)

    constants = build_constants(raw_names, max_identifier_length)
    return GenerationRequest.from_mapping(
        namespace_name=namespace_name,
        class_name=class_name,
        mapping=constants,
        max_identifier_length=max_identifier_length,
        output_directory=output_directory,
        file_extension=file_extension,
    )


class StringClassGenerator:
    """Generates the stylesheet and markup constant classes for one configuration."""

    def __init__(
        self,
        namespace: Optional[str] = None,
        output_dir: Optional[str] = None,
        max_identifier_length: int = DefaultConfig.MAX_IDENTIFIER_LENGTH,
        file_extension: str = DefaultConfig.FILE_EXTENSION,
        asset_source: Optional[AssetSource] = None,
        env: Optional[Environment] = None,
    ):
        self.namespace = resolve_namespace(namespace)
        self.output_dir = output_dir or DefaultConfig.OUTPUT_DIR
        self.max_identifier_length = max_identifier_length
        self.file_extension = file_extension
        self.asset_source = asset_source or FileSystemAssetSource()
        self.env = env or setup_jinja_env()

    def _stylesheet_names(self, path: str) -> List[str]:
        return extract_style_class_names(self.asset_source.read_asset_text(path))

    def _markup_names(self, path: str) -> List[str]:
        text = self.asset_source.read_asset_text(path)
        return extract_element_names(self.asset_source.parse_markup(text))

    def generate_target(
        self,
        target: GenerationTarget,
        source_path: str,
        preview: bool = False,
    ) -> GenerationResult:
        """
        Generate one target; errors are recorded on the result, not raised.

        With ``preview`` the rendered code is returned without touching disk.
        """
        naming: Dict[GenerationTarget, Callable[[str], str]] = {
            GenerationTarget.STYLESHEET: stylesheet_class_name,
            GenerationTarget.MARKUP: markup_class_name,
        }
        extractors: Dict[GenerationTarget, Callable[[str], List[str]]] = {
            GenerationTarget.STYLESHEET: self._stylesheet_names,
            GenerationTarget.MARKUP: self._markup_names,
        }

        result = GenerationResult(target=target, source_path=str(source_path))
        try:
            result.class_name = naming[target](Path(source_path).stem)
            validate_class_names(self.namespace, result.class_name)
            log_progress(logger, f"Generating {target.value} class '{result.class_name}' from {source_path}")

            raw_names = extractors[target](source_path)
            request = build_request(
                self.namespace,
                result.class_name,
                raw_names,
                self.max_identifier_length,
                self.output_dir,
                self.file_extension,
            )
            result.constants = request.as_mapping()
            log_highlight(
                logger,
                f"Found {_INFLECT_ENGINE_.no('name', len(raw_names))}, "
                f"emitting {_INFLECT_ENGINE_.no('constant', result.constant_count)}",
            )

            result.code = render_request(request, env=self.env)
            if not preview:
                result.output_path = write_generated_file(
                    request.output_directory, request.class_name, result.code, request.file_extension
                )
                log_success(logger, f"Generated file: {result.output_path}")
        except StringGeneratorError as e:
            logger.error(f"Failed to generate {target.value} class from {source_path}: {e.message}")
            result.error = e
        return result

    def generate(
        self,
        stylesheet: Optional[str] = None,
        markup: Optional[str] = None,
        preview: bool = False,
    ) -> List[GenerationResult]:
        """
        Generate every selected target, continuing past a failed one.

        Raises:
            ConfigurationError: If neither a stylesheet nor a markup file is given
        """
        if not stylesheet and not markup:
            raise_configuration_error("No StyleSheet or UXML file selected!")

        results = []
        if stylesheet:
            results.append(self.generate_target(GenerationTarget.STYLESHEET, stylesheet, preview))
        if markup:
            results.append(self.generate_target(GenerationTarget.MARKUP, markup, preview))
        return results


def generate_string_classes(config, preview: bool = False, asset_source: Optional[AssetSource] = None) -> List[GenerationResult]:
    """Run the generator for a validated ``GeneratorConfigSchema``."""
    generator = StringClassGenerator(
        namespace=config.namespace,
        output_dir=config.output_dir,
        max_identifier_length=config.max_identifier_length,
        file_extension=config.file_extension,
        asset_source=asset_source,
    )
    return generator.generate(config.stylesheet, config.markup, preview=preview)
