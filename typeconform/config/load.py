"""Loading classifier options from TOML files."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from typeconform.config.options import ClassifierOptions

logger = logging.getLogger(__name__)


def load_classifier_options(path: str | Path) -> ClassifierOptions:
    """Read options from `[tool.typeconform]`, or from the top-level table."""
    config_path = Path(path)
    with config_path.open("rb") as handle:
        document = tomllib.load(handle)

    tool = document.get("tool")
    table = tool.get("typeconform", {}) if isinstance(tool, dict) else document
    if not isinstance(table, dict):
        raise ValueError(f"`tool.typeconform` in {config_path} must be a table")

    options = ClassifierOptions.from_mapping(table)
    logger.debug(
        "loaded %d comparable and %d equatable type names from %s",
        len(options.additional_comparable_types),
        len(options.additional_equatable_types),
        config_path,
    )
    return options
