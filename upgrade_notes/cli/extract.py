"""
CLI Entry Point: upgrade-notes

Cuts a release log down to the dated sections relevant to an upgrade
between two vendor versions.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from upgrade_notes.config import ExtractorConfig, config_from_dict, load_config
from upgrade_notes.core import ExtractionResult, extract_upgrade_notes
from upgrade_notes.utils.console import print_error, print_step, print_success, print_table, print_warning
from upgrade_notes.utils.contracts import ContractError, validate_output
from upgrade_notes.versions import FormatError

RESULT_SCHEMA_VERSION = "1.0.0"


def read_document(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).expanduser().read_text(encoding="utf-8")


def result_to_json(result: ExtractionResult) -> dict[str, Any]:
    return {
        "schema_version": RESULT_SCHEMA_VERSION,
        "source": str(result.source),
        "target": str(result.target),
        "window": {"left": result.window.left, "right": result.window.right},
        "marker_window": {"left": result.marker_window.left, "right": result.marker_window.right},
        "sections": [
            {
                "heading": section.heading,
                "released_on": section.released_on.isoformat() if section.released_on else None,
                "versions": list(section.versions),
            }
            for section in result.sections
        ],
        "skipped_markers": [
            {"text": marker.text, "start": marker.start, "end": marker.end} for marker in result.skipped_markers
        ],
        "text": result.text,
    }


def output_summary(result: ExtractionResult, document_length: int) -> None:
    print_step(f"Upgrade {result.source} -> {result.target}")
    rows = [
        [
            section.released_on.isoformat() if section.released_on else section.heading,
            str(len(section.versions)),
            ", ".join(section.versions) or "-",
        ]
        for section in result.sections
    ]
    print_table("Included Sections", ["Date", "Markers", "Versions"], rows)

    for marker in result.skipped_markers:
        print_warning(f"Skipped unparsable marker `{marker.text}` at offset {marker.start}")

    print_success(
        f"Kept characters {result.window.left}-{result.window.right} of {document_length} "
        f"({len(result.sections)} dated sections)."
    )


def build_config(args: argparse.Namespace) -> ExtractorConfig:
    config = load_config(args.config) if args.config else ExtractorConfig()
    if args.vendor_tag:
        config = config_from_dict({**asdict(config), "vendor_tag": args.vendor_tag})
    return config


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Extract the release notes relevant to an upgrade between two vendor versions."
    )
    parser.add_argument("notes", help="Release notes text file, or '-' to read stdin.")
    parser.add_argument("--source", required=True, help="Version the upgrade starts from (e.g. 1.33.5-gke.1201000).")
    parser.add_argument("--target", required=True, help="Version the upgrade ends at (e.g. 1.34.1-gke.1431000).")
    parser.add_argument("--config", type=Path, default=None, help="Optional extractor configuration JSON.")
    parser.add_argument("--vendor-tag", default=None, help="Vendor tag in version strings (overrides --config).")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Output machine-readable JSON.")
    output.add_argument("--summary", action="store_true", help="Print a table of the included sections.")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="With --json, print the payload even if it violates the output contract (a warning is shown).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s [%(name)s] %(message)s",
    )

    try:
        config = build_config(args)
        document = read_document(args.notes)
        result = extract_upgrade_notes(document, args.source.strip(), args.target.strip(), config)
    except FileNotFoundError as exc:
        print_error(f"File not found: {exc.filename}", exit_code=2)
    except UnicodeDecodeError as exc:
        print_error(f"Release notes are not valid UTF-8: {exc}", exit_code=2)
    except (FormatError, ContractError) as exc:
        print_error(str(exc), exit_code=2)

    if args.json:
        payload = result_to_json(result)
        try:
            validate_output(payload, "extraction_result", mode="REVIEW" if args.lenient else "STRICT")
        except ContractError as exc:
            print_error(str(exc), exit_code=2)
        print(json.dumps(payload, indent=2))
    elif args.summary:
        output_summary(result, len(document))
    else:
        sys.stdout.write(result.text)


if __name__ == "__main__":
    main()
