from upgrade_notes.config import ExtractorConfig, load_config
from upgrade_notes.core import (
    ExtractionResult,
    HeadingOccurrence,
    MarkerOccurrence,
    ReleaseSection,
    SelectionWindow,
    expand_window,
    extract_relevant,
    extract_upgrade_notes,
    scan_document,
    scan_headings,
    scan_markers,
    select_range,
    split_sections,
)
from upgrade_notes.versions import (
    FormatError,
    Ordering,
    VendorVersion,
    compare_versions,
    format_version,
    parse_version,
)

__all__ = [
    "ExtractionResult",
    "ExtractorConfig",
    "FormatError",
    "HeadingOccurrence",
    "MarkerOccurrence",
    "Ordering",
    "ReleaseSection",
    "SelectionWindow",
    "VendorVersion",
    "compare_versions",
    "expand_window",
    "extract_relevant",
    "extract_upgrade_notes",
    "format_version",
    "load_config",
    "parse_version",
    "scan_document",
    "scan_headings",
    "scan_markers",
    "select_range",
    "split_sections",
]
