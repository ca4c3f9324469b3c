import argparse
import logging
import sys
from typing import List, Optional

from uml_enum_generator.config_validation import load_config
from uml_enum_generator.codegen.code_generator import generate_enumerations
from uml_enum_generator.exceptions import EnumGeneratorError

from uml_enum_generator.colored_logging import (
    setup_colored_logging,
    get_colored_logger,
    log_success,
    log_progress,
    log_highlight,
    log_section
)

# Note: Colored logging will be configured after parsing args
logger = None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uml-enum-generator",
        description="Generate Java enum sources from the Enumeration classifiers of a structural UML model.",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "-m",
        "--model-file",
        dest="model_file",
        help="Path to the YAML/JSON model file. Overrides config file setting.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Root directory for generated sources. Overrides config file setting.",
    )
    parser.add_argument(
        "--fail-fast",
        dest="fail_fast",
        action="store_true",
        default=None,
        help="Stop at the first enumeration that cannot be generated.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose DEBUG logging for the generator tool.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output (useful for CI/CD environments).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    # --- Argument Parsing ---
    args = build_parser().parse_args(argv)

    # --- Logging Setup ---
    use_colors = not args.no_color
    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_colored_logging(level=log_level, use_colors=use_colors)

    global logger
    logger = get_colored_logger(__name__)

    if args.verbose:
        logger.debug("Verbose mode enabled. DEBUG level logging activated.")
    if args.no_color:
        logger.debug("Color output disabled.")

    # --- Main Execution Pipeline ---
    try:
        # 1. Load Configuration
        log_progress(logger, "Loading configuration...")
        config = load_config(args.config, args)
        logger.debug(f"Effective configuration loaded: {config}")

        # 2. Generate enumerations
        log_section(logger, "Enumeration Generation")
        log_progress(logger, f"Generating enumerations of {config.model_file}...")
        result = generate_enumerations(config)

    # --- Error Handling ---
    except EnumGeneratorError as e:
        logger.error(f"{type(e).__name__}: {e}", exc_info=args.verbose)
        sys.exit(1)
    except OSError as e:
        logger.error(f"I/O Error: {e}", exc_info=args.verbose)
        sys.exit(1)

    if not result.succeeded:
        log_section(logger, "Failures")
        for failure in result.failures:
            log_highlight(logger, f"Skipping {failure.classifier_name}: {failure.message}")
        logger.error(
            f"{len(result.failures)} of {len(result.failures) + len(result.generated_files)} "
            "enumerations could not be generated."
        )
        sys.exit(1)

    log_section(logger, "Completion")
    log_success(logger, f"Enumeration generation completed successfully in {config.output_dir}")


# --- Script Entry Point ---
if __name__ == "__main__":
    main()
