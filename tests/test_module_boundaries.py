from __future__ import annotations

import re
from pathlib import Path

PACKAGE = Path("hexmap")

_OPTIONAL_PATTERNS = (
    re.compile(r"\bOptional\["),
    re.compile(r"\bUnion\[[^\]]*\bNone\b"),
)
_CUBIC_REFERENCE = re.compile(r"\b_CubicCoordinate\b")


def _package_sources() -> dict[str, str]:
    return {
        path.name: path.read_text(encoding="utf-8") for path in sorted(PACKAGE.glob("*.py"))
    }


def test_package_sources_found() -> None:
    assert {"coords.py", "directions.py", "grid.py"} <= set(_package_sources())


def test_optional_values_use_union_syntax() -> None:
    offending = [
        name
        for name, text in _package_sources().items()
        if any(pattern.search(text) for pattern in _OPTIONAL_PATTERNS)
    ]
    assert not offending, f"use `X | None` instead of Optional in: {offending}"


def test_cubic_coordinate_stays_inside_coords() -> None:
    leaking = [
        name
        for name, text in _package_sources().items()
        if name != "coords.py" and _CUBIC_REFERENCE.search(text)
    ]
    assert not leaking, f"_CubicCoordinate referenced outside coords.py: {leaking}"


def test_cubic_coordinate_not_exported_from_coords() -> None:
    from hexmap import coords

    assert coords.__all__ == ["AxialCoordinate"]


def test_builtin_generics_used_for_containers() -> None:
    legacy = re.compile(
        r"\b(Dict|List|Tuple|Set)\[|from typing import [^\n]*\b(Dict|List|Tuple|Set)\b"
    )
    offending = [name for name, text in _package_sources().items() if legacy.search(text)]
    assert not offending, f"use builtin dict/list/tuple/set generics in: {offending}"
