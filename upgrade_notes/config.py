from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from upgrade_notes.utils.contracts import ContractError, validate_output
from upgrade_notes.versions import DEFAULT_VENDOR_TAG

logger = logging.getLogger(__name__)

DEFAULT_HEADING_DATE_FORMAT = "%B %d, %Y"


@dataclass(frozen=True)
class ExtractorConfig:
    vendor_tag: str = DEFAULT_VENDOR_TAG
    heading_date_format: str = DEFAULT_HEADING_DATE_FORMAT

    def __post_init__(self) -> None:
        validate_output(asdict(self), "extractor_config")


def config_from_dict(payload: dict[str, Any]) -> ExtractorConfig:
    """Build an ExtractorConfig from a payload already shaped like the config schema."""
    validate_output(payload, "extractor_config")
    return ExtractorConfig(
        vendor_tag=payload.get("vendor_tag", DEFAULT_VENDOR_TAG),
        heading_date_format=payload.get("heading_date_format", DEFAULT_HEADING_DATE_FORMAT),
    )


def load_config(path: Path) -> ExtractorConfig:
    """
    Load and validate an extractor configuration JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ContractError: If the file is not JSON or does not satisfy the extractor_config schema.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload: dict[str, Any] = json.load(handle)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ContractError(f"Data Contract Violation (extractor_config): {path} is not valid JSON: {exc}") from exc
    config = config_from_dict(payload)
    logger.info(f"Loaded extractor config from {path} (vendor tag `{config.vendor_tag}`)")
    return config
