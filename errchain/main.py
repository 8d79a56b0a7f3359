import argparse
import logging
import sys
from typing import Optional

from errchain.common.errors import ErrchainError
from errchain.config import AppConfig, load_config, get_default_config_path
from errchain.core.catalog import register_catalog
from errchain.core.chain import with_code
from errchain.core.registry import Registry
from errchain.core.render import RenderMode, render
from errchain.ops.logger import setup_logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="errchain: inspect a registered error code catalog")

    parser.add_argument(
        "--config",
        type=str,
        default=str(get_default_config_path()),
        help="Path to the YAML configuration file holding the code catalog.",
    )

    parser.add_argument(
        "--code",
        type=int,
        help="Show the metadata of a single code instead of listing the catalog.",
    )

    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in RenderMode],
        help="Render mode for the sample error printed with --code (overrides the config).",
    )

    return parser.parse_args(argv)


def bootstrap_registry(config: AppConfig) -> Registry:
    """
    Build a fresh registry holding the configured catalog. Registration
    errors propagate so startup can stop on a broken catalog.
    """
    registry = Registry()
    register_catalog(registry, config.codes)
    return registry


def _describe(coder) -> str:
    line = f"{coder.code:>6}  {coder.http_status}  {coder.display_text}"
    if coder.reference:
        line += f"  ({coder.reference})"
    return line


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    temp_logger = logging.getLogger("errchain.bootstrap")

    try:
        config = load_config(args.config)
        temp_logger.info("Configuration loaded from %s", args.config)
    except (FileNotFoundError, ErrchainError) as exc:
        temp_logger.error("Failed to load configuration: %s", exc)
        return 1

    logger = setup_logger(config.logging.level, config.logging.logs_dir)

    try:
        registry = bootstrap_registry(config)
    except ErrchainError as exc:
        logger.error("Code catalog rejected: %s", exc)
        return 1

    logger.info("Registry holds %d codes", len(registry))

    if args.code is None:
        for coder in registry.coders():
            print(_describe(coder))
        return 0

    coder = registry.get(args.code)
    if coder is None:
        logger.error("Code %d is not registered", args.code)
        return 2

    mode = RenderMode(args.mode or config.render.mode)
    sample = with_code(coder.code, "sample error for code %d", coder.code)
    print(_describe(coder))
    print(render(sample, mode, source_lines=config.render.source_lines))
    return 0


def run(argv: Optional[list] = None) -> None:
    sys.exit(main(argv))


if __name__ == "__main__":
    run()
