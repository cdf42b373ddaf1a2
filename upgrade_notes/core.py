#!/usr/bin/env python3

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime

from upgrade_notes.config import ExtractorConfig
from upgrade_notes.versions import (
    DEFAULT_VENDOR_TAG,
    FormatError,
    Ordering,
    VendorVersion,
    compare_versions,
    parse_version,
)

logger = logging.getLogger(__name__)

# A line holding only a date such as "October 28, 2025".
RELEASE_HEADING_RE = re.compile(r"^[ \t]*[A-Za-z]+[ \t]+\d+,[ \t]+\d+[ \t]*\r?$", re.MULTILINE)


@dataclass(frozen=True)
class MarkerOccurrence:
    text: str
    start: int
    end: int


@dataclass(frozen=True)
class HeadingOccurrence:
    start: int
    end: int


@dataclass(frozen=True)
class SelectionWindow:
    left: int
    right: int

    def __post_init__(self) -> None:
        if not 0 <= self.left <= self.right:
            raise ValueError(f"Invalid selection window [{self.left}, {self.right})")


@dataclass(frozen=True)
class ReleaseSection:
    heading: str
    released_on: date | None
    start: int
    end: int
    versions: tuple[str, ...] = ()


@dataclass
class ExtractionResult:
    text: str
    window: SelectionWindow
    marker_window: SelectionWindow
    source: VendorVersion
    target: VendorVersion
    markers: list[MarkerOccurrence]
    skipped_markers: list[MarkerOccurrence] = field(default_factory=list)
    sections: list[ReleaseSection] = field(default_factory=list)


def marker_pattern(vendor_tag: str = DEFAULT_VENDOR_TAG) -> re.Pattern[str]:
    return re.compile(rf"\d+\.\d+\.\d+-{re.escape(vendor_tag)}\.\d+")


def scan_markers(document: str, vendor_tag: str = DEFAULT_VENDOR_TAG) -> list[MarkerOccurrence]:
    """Find every version marker, left to right, without interpreting it."""
    return [
        MarkerOccurrence(match.group(0), match.start(), match.end())
        for match in marker_pattern(vendor_tag).finditer(document)
    ]


def scan_headings(document: str) -> list[HeadingOccurrence]:
    return [HeadingOccurrence(match.start(), match.end()) for match in RELEASE_HEADING_RE.finditer(document)]


def scan_document(
    document: str,
    config: ExtractorConfig | None = None,
) -> tuple[list[MarkerOccurrence], list[HeadingOccurrence]]:
    config = config or ExtractorConfig()
    return scan_markers(document, config.vendor_tag), scan_headings(document)


def parse_marker_versions(
    markers: list[MarkerOccurrence],
    vendor_tag: str = DEFAULT_VENDOR_TAG,
) -> tuple[list[VendorVersion | None], list[MarkerOccurrence]]:
    """
    Parse every marker, keeping positions aligned with `markers`.

    Markers that fail to parse become None and are also returned in the
    skipped list; they never abort the scan.
    """
    versions: list[VendorVersion | None] = []
    skipped: list[MarkerOccurrence] = []
    for marker in markers:
        try:
            versions.append(parse_version(marker.text, tag=vendor_tag))
        except FormatError as exc:
            logger.debug(f"Skipping marker at offset {marker.start}: {exc}")
            versions.append(None)
            skipped.append(marker)
    return versions, skipped


def select_range(
    markers: list[MarkerOccurrence],
    source: VendorVersion,
    target: VendorVersion,
    document_length: int,
    versions: list[VendorVersion | None] | None = None,
) -> SelectionWindow:
    """
    Compute the marker-granular window covering every version in [source, target].

    The markers are only approximately newest-first, so both scans walk them in
    document order and commit to a boundary at the first marker that is
    unambiguously outside the range; the neighbor scanned just before it
    becomes the edge.

    Args:
        markers: Marker occurrences in document order.
        source: Version the upgrade starts from (drives the right edge).
        target: Version the upgrade ends at (drives the left edge).
        document_length: Length of the scanned document.
        versions: Pre-parsed versions aligned with `markers`, None for skipped ones.

    Returns:
        The window before section expansion.
    """
    if versions is None:
        versions, _ = parse_marker_versions(markers, target.tag)

    left = 0
    for index, version in enumerate(versions):
        if version is None:
            continue
        order = compare_versions(version, target)
        if order is Ordering.EQUAL:
            left = markers[index].start
            break
        if order is Ordering.LESS:
            # First entry older than target: the newer neighbor bounds the range.
            left = markers[index - 1].start if index > 0 else markers[index].start
            break

    right = document_length
    last_index = len(markers) - 1
    for index in range(last_index, -1, -1):
        version = versions[index]
        if version is None:
            continue
        order = compare_versions(version, source)
        if order is Ordering.EQUAL:
            right = markers[index].end
            break
        if order is Ordering.GREATER:
            # First entry newer than source from the old end: the older neighbor bounds the range.
            right = markers[index + 1].end if index < last_index else markers[index].end
            break

    if left > right:
        logger.warning(
            f"Boundary scans crossed (left {left} > right {right}) for source {source} and target {target}; "
            "collapsing to the section at the left boundary."
        )
        right = left

    return SelectionWindow(left, right)


def expand_window(
    window: SelectionWindow,
    headings: list[HeadingOccurrence],
    document_length: int,
) -> SelectionWindow:
    """Widen a marker-granular window so both edges land on a heading or a document edge."""
    preceding = [heading for heading in headings if heading.end <= window.left]
    left = preceding[-1].start if preceding else 0

    following = next((heading for heading in headings if heading.start >= window.right), None)
    right = following.start if following is not None else document_length

    return SelectionWindow(left, right)


def parse_heading_date(heading: str, date_format: str) -> date | None:
    try:
        return datetime.strptime(heading.strip(), date_format).date()
    except ValueError:
        return None


def split_sections(text: str, config: ExtractorConfig | None = None) -> list[ReleaseSection]:
    """
    Cut text into dated sections, one per heading.

    Text before the first heading does not belong to any section.
    """
    config = config or ExtractorConfig()
    markers, headings = scan_document(text, config)

    sections: list[ReleaseSection] = []
    for index, heading in enumerate(headings):
        end = headings[index + 1].start if index + 1 < len(headings) else len(text)
        heading_text = text[heading.start : heading.end].strip()
        versions = tuple(marker.text for marker in markers if heading.end <= marker.start and marker.end <= end)
        sections.append(
            ReleaseSection(
                heading=heading_text,
                released_on=parse_heading_date(heading_text, config.heading_date_format),
                start=heading.start,
                end=end,
                versions=versions,
            )
        )
    return sections


def extract_upgrade_notes(
    document: str,
    source_version: str,
    target_version: str,
    config: ExtractorConfig | None = None,
) -> ExtractionResult:
    """
    Extract the dated sections relevant to an upgrade from source to target.

    Both versions are validated before the document is scanned.

    Raises:
        FormatError: If source_version or target_version is malformed.
    """
    config = config or ExtractorConfig()
    source = parse_version(source_version, tag=config.vendor_tag)
    target = parse_version(target_version, tag=config.vendor_tag)

    markers, headings = scan_document(document, config)
    versions, skipped = parse_marker_versions(markers, config.vendor_tag)
    if all(version is None for version in versions):
        logger.warning("No parsable version markers found; keeping the whole document.")

    marker_window = select_range(markers, source, target, len(document), versions=versions)
    window = expand_window(marker_window, headings, len(document))
    logger.debug(
        f"Selected [{marker_window.left}, {marker_window.right}) expanded to [{window.left}, {window.right}) "
        f"out of {len(document)} characters"
    )

    text = document[window.left : window.right]
    return ExtractionResult(
        text=text,
        window=window,
        marker_window=marker_window,
        source=source,
        target=target,
        markers=markers,
        skipped_markers=skipped,
        sections=split_sections(text, config),
    )


def extract_relevant(
    document: str,
    source_version: str,
    target_version: str,
    config: ExtractorConfig | None = None,
) -> str:
    return extract_upgrade_notes(document, source_version, target_version, config).text
