import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema.exceptions import ValidationError

from upgrade_notes.utils.console import print_warning


class ContractError(Exception):
    """Raised when a payload or config file violates its data contract."""

    pass


def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a JSON schema from the package."""
    schema_path = Path(__file__).parent.parent / "schemas" / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_name}")

    with open(schema_path, "r", encoding="utf-8") as f:
        return dict(json.load(f))


def validate_output(data: Dict[str, Any], schema_name: str, mode: str = "STRICT") -> None:
    """
    Validate data against a JSON schema.

    Args:
        data: The dictionary to validate.
        schema_name: Name of the schema file (without .json extension).
        mode: 'STRICT' (raises error) or 'REVIEW' (prints a warning).

    Raises:
        ContractError: If validation fails and mode is STRICT.
    """
    try:
        schema = load_schema(schema_name)
        jsonschema.validate(instance=data, schema=schema)
    except (ValidationError, FileNotFoundError) as e:
        msg = f"Data Contract Violation ({schema_name}): {str(e)}"
        if mode == "STRICT":
            raise ContractError(msg) from e
        print_warning(msg)
