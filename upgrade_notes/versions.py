from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum

DEFAULT_VENDOR_TAG = "gke"
NUMERIC_COMPONENT_RE = re.compile(r"[0-9]+")


class FormatError(ValueError):
    """Raised when a string is not a `major.minor.patch-<tag>.vendorPatch` version."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Invalid version `{text}`: {reason}")
        self.text = text
        self.reason = reason


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True, order=True)
class VendorVersion:
    major: int
    minor: int
    patch: int
    vendor_patch: int
    tag: str = field(default=DEFAULT_VENDOR_TAG, compare=False)

    def __str__(self) -> str:
        return format_version(self)


def parse_numeric_component(component: str, name: str, text: str) -> int:
    # int() would also accept signs, whitespace and non-ASCII digits.
    if not NUMERIC_COMPONENT_RE.fullmatch(component):
        raise FormatError(text, f"cannot parse {name} component `{component}`")
    return int(component)


def parse_version(text: str, tag: str = DEFAULT_VENDOR_TAG) -> VendorVersion:
    """
    Parse a vendor version such as `1.34.1-gke.1431000`.

    Args:
        text: The version string.
        tag: Vendor tag between the upstream version and the vendor patch.

    Returns:
        The parsed VendorVersion.

    Raises:
        FormatError: If the separator is missing or repeated, the upstream part
            is not three dot-separated components, or any component is not a
            non-negative integer.
    """
    separator = f"-{tag}."
    parts = text.split(separator)
    if len(parts) != 2:
        raise FormatError(text, f"expected exactly one `{separator}` separator")

    upstream_part, vendor_part = parts
    upstream = upstream_part.split(".")
    if len(upstream) != 3:
        raise FormatError(text, f"upstream part `{upstream_part}` must have three components")

    major = parse_numeric_component(upstream[0], "major", text)
    minor = parse_numeric_component(upstream[1], "minor", text)
    patch = parse_numeric_component(upstream[2], "patch", text)
    vendor_patch = parse_numeric_component(vendor_part, "vendor patch", text)
    return VendorVersion(major, minor, patch, vendor_patch, tag=tag)


def format_version(version: VendorVersion) -> str:
    return f"{version.major}.{version.minor}.{version.patch}-{version.tag}.{version.vendor_patch}"


def compare_versions(x: VendorVersion, y: VendorVersion) -> Ordering:
    """Compare major, minor, patch, then vendor patch; the first unequal field decides."""
    left = (x.major, x.minor, x.patch, x.vendor_patch)
    right = (y.major, y.minor, y.patch, y.vendor_patch)
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL
