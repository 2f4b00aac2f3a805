import argparse
import logging
import sys
from typing import List, Optional

from uitk_string_generator.config_validation import load_config
from uitk_string_generator.exceptions import StringGeneratorError
from uitk_string_generator.generator import generate_string_classes

from uitk_string_generator.colored_logging import (
    setup_colored_logging,
    get_colored_logger,
    log_success,
    log_progress,
    log_section,
)

# Configured after argument parsing
logger = None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uitk-strings",
        description="Generate C# string constant classes from Unity UI Toolkit USS and UXML assets.",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to a YAML configuration file. CLI arguments override its values.",
    )
    parser.add_argument(
        "--stylesheet",
        help="USS stylesheet to generate the <Name>Classes class from.",
    )
    parser.add_argument(
        "--markup",
        help="UXML document to generate the <Name>Strings class from.",
    )
    parser.add_argument(
        "-n",
        "--namespace",
        help="Namespace of the generated classes (default: UIToolKitStrings).",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        help="Directory to write the generated files to.",
    )
    parser.add_argument(
        "-m",
        "--max-identifier-length",
        type=int,
        help="Abbreviate constant names longer than this (default: 20).",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print the generated code instead of writing files.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose DEBUG logging.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output (useful for CI/CD environments).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # --- Logging Setup ---
    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_colored_logging(level=log_level, use_colors=not args.no_color)

    global logger
    logger = get_colored_logger(__name__)
    logger.debug("Verbose mode enabled. DEBUG level logging activated.")

    # --- Main Execution Pipeline ---
    try:
        log_progress(logger, "Loading configuration...")
        config = load_config(args.config, args)
        logger.debug(f"Effective configuration loaded: {config}")

        log_section(logger, "String Class Generation")
        results = generate_string_classes(config, preview=args.preview)
    except StringGeneratorError as e:
        logger.error(f"{e}", exc_info=args.verbose)
        return 1
    except Exception as e:
        logger.error(
            f"An unexpected error occurred during generation: {e}", exc_info=True
        )
        return 1

    failed = [result for result in results if not result.succeeded]
    for result in results:
        if args.preview and result.succeeded:
            sys.stdout.write(result.code)

    if failed:
        for result in failed:
            logger.error(f"{result.target.value} target failed:\n{result.error}")
        return 1

    log_success(logger, "String classes generated successfully.")
    return 0


# --- Script Entry Point ---
if __name__ == "__main__":
    sys.exit(main())
