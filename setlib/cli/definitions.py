"""Named set definitions loaded from YAML.

A definitions file maps names to sets, written either as literals or as
YAML sequences::

    A: "{1, 2, 3}"
    B: [3, 4, [5, 6]]
    empty: []

Nested sequences become nested sets. Scalars in sequences are coerced like
any other set member (int, float, str).
"""

from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML

from setlib.core.errors import DefinitionError, SetError
from setlib.core.parser import parse
from setlib.core.sets import Set


def load_definitions(path: str) -> Dict[str, Set]:
    """Load named sets from a YAML file.

    Args:
        path: Path to the definitions file

    Returns:
        Mapping from definition name to Set

    Raises:
        DefinitionError: If the file is not a mapping or an entry is neither
            a literal string nor a sequence
        MalformedLiteralError: If a literal string is not brace-wrapped
    """
    yaml = YAML(typ="safe")
    data = yaml.load(Path(path).read_text())

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DefinitionError(
            f"Definitions file must contain a mapping, got {type(data).__name__}",
            path=path,
        )

    definitions: Dict[str, Set] = {}
    for name, value in data.items():
        definitions[str(name)] = set_from_data(value, name=str(name), path=path)
    return definitions


def set_from_data(value: Any, name: Optional[str] = None, path: Optional[str] = None) -> Set:
    """Build a Set from a YAML value (literal string or sequence)."""
    if isinstance(value, str):
        return parse(value)
    if isinstance(value, list):
        result = Set()
        for item in value:
            if isinstance(item, list):
                result.add(set_from_data(item, name=name, path=path))
                continue
            try:
                result.add(item)
            except SetError as e:
                raise DefinitionError(
                    f"Invalid member in definition '{name}': {e}", name=name, path=path
                ) from e
        return result
    raise DefinitionError(
        f"Definition '{name}' must be a literal string or a sequence, "
        f"got {type(value).__name__}",
        name=name,
        path=path,
    )


def resolve_operand(token: str, definitions: Optional[Dict[str, Set]] = None) -> Set:
    """Resolve a CLI operand to a Set.

    Names found in definitions win; anything else is parsed as a literal.
    The returned Set is a copy, so callers may mutate it freely.
    """
    if definitions and token in definitions:
        return Set.copy_of(definitions[token])
    return parse(token)
