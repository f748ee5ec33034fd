"""JSON declaration stream: the boundary to whatever parser exported the declarations."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from clean_code_conventions.domain.declarations import (
    Declaration,
    DeclarationKind,
    Location,
    Modifier,
    ModifierKind,
    ModifierSet,
)
from clean_code_conventions.domain.entities import FixResult
from clean_code_conventions.domain.protocols import DeclarationSourceProtocol

logger = logging.getLogger(__name__)


class DeclarationGateway(DeclarationSourceProtocol):
    """
    Reads and writes declarations as JSON.

    Accepted input is either a list of declaration objects or a document
    `{"path": "...", "declarations": [...]}`. A declaration object looks like:

        {
          "kind": "field",
          "identifier": "total",            # or "identifiers": ["a", "b"]
          "modifiers": ["private", {"keyword": "static", "whitespace_after": "  "}],
          "is_const": false,                # optional, derived from modifiers
          "location": {"line": 3, "column": 5, "end_line": 3, "end_column": 23},
          "identifier_location": {"line": 3, "column": 17},
          "leading_trivia": "    "
        }

    Locations without a "path" inherit the document path (or the file name).
    Malformed entries raise ValueError; the checker never sees a declaration
    without a name.
    """

    def load(self, path: str) -> list[Declaration]:
        file_path = Path(path)
        with file_path.open(encoding="utf-8") as f:
            text = f.read()
        declarations = self.loads(text, default_path=str(file_path))
        logger.debug("Loaded %d declaration(s) from %s", len(declarations), path)
        return declarations

    def loads(self, text: str, default_path: str = "<stdin>") -> list[Declaration]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Declaration stream is not valid JSON: {e}") from e

        if isinstance(data, dict):
            default_path = str(data.get("path", default_path))
            entries = data.get("declarations", [])
        else:
            entries = data
        if not isinstance(entries, list):
            raise ValueError("'declarations' must be a list")

        return [self.parse_declaration(entry, default_path, i) for i, entry in enumerate(entries)]

    def parse_declaration(self, entry: Any, default_path: str, index: int = 0) -> Declaration:
        if not isinstance(entry, dict):
            raise ValueError(f"Declaration #{index} must be an object, got {type(entry).__name__}")

        try:
            kind = DeclarationKind(str(entry.get("kind", "")).lower())
        except ValueError:
            raise ValueError(f"Declaration #{index} has unknown kind {entry.get('kind')!r}") from None

        identifiers = self._list_field(entry, "identifiers", index)
        identifier = entry.get("identifier") or (identifiers[0] if identifiers else None)
        if not isinstance(identifier, str) or not identifier:
            raise ValueError(f"Declaration #{index} has no identifier")

        modifiers = ModifierSet(
            tuple(self._parse_modifier(m, default_path) for m in self._list_field(entry, "modifiers", index))
        )
        is_const = entry.get("is_const")

        return Declaration(
            kind=kind,
            identifier=identifier,
            modifiers=modifiers,
            is_const=bool(is_const) if is_const is not None else None,
            location=self._parse_location(entry.get("location"), default_path),
            identifier_location=self._parse_location(entry.get("identifier_location"), default_path),
            leading_trivia=str(entry.get("leading_trivia", "")),
            identifiers=tuple(str(i) for i in identifiers),
        )

    @staticmethod
    def _list_field(entry: dict, key: str, index: int) -> list:
        """Optional list-valued key; absent means empty."""
        raw = entry.get(key)
        if raw is None and key not in entry:
            return []
        if not isinstance(raw, list):
            raise ValueError(f"Declaration #{index}: '{key}' must be a list, got {type(raw).__name__}")
        return raw

    def _parse_modifier(self, raw: Any, default_path: str) -> Modifier:
        if isinstance(raw, str):
            return Modifier(ModifierKind.from_keyword(raw))
        if isinstance(raw, dict) and "keyword" in raw:
            return Modifier(
                kind=ModifierKind.from_keyword(str(raw["keyword"])),
                location=self._parse_location(raw.get("location"), default_path),
                whitespace_after=str(raw.get("whitespace_after", " ")),
            )
        raise ValueError(f"Malformed modifier: {raw!r}")

    @staticmethod
    def _parse_location(raw: Any, default_path: str) -> Optional[Location]:
        if raw is None:
            return None
        if not isinstance(raw, dict) or "line" not in raw:
            raise ValueError(f"Malformed location: {raw!r}")
        try:
            return Location(
                path=str(raw.get("path", default_path)),
                line=int(raw["line"]),
                column=int(raw.get("column", 1)),
                end_line=int(raw["end_line"]) if raw.get("end_line") is not None else None,
                end_column=int(raw["end_column"]) if raw.get("end_column") is not None else None,
            )
        except (TypeError, ValueError, OverflowError):
            raise ValueError(f"Malformed location: {raw!r}") from None

    # --- output -----------------------------------------------------------

    @staticmethod
    def location_to_dict(location: Optional[Location]) -> Optional[dict[str, Any]]:
        if location is None:
            return None
        result: dict[str, Any] = {"path": location.path, "line": location.line, "column": location.column}
        if location.end_line is not None:
            result["end_line"] = location.end_line
        if location.end_column is not None:
            result["end_column"] = location.end_column
        return result

    def declaration_to_dict(self, declaration: Declaration) -> dict[str, Any]:
        modifiers = []
        for m in declaration.modifiers:
            item: dict[str, Any] = {"keyword": m.kind.value, "whitespace_after": m.whitespace_after}
            if m.location is not None:
                item["location"] = self.location_to_dict(m.location)
            modifiers.append(item)
        return {
            "kind": declaration.kind.value,
            "identifier": declaration.identifier,
            "identifiers": list(declaration.identifiers),
            "modifiers": modifiers,
            "is_const": declaration.is_const,
            "location": self.location_to_dict(declaration.location),
            "identifier_location": self.location_to_dict(declaration.identifier_location),
            "leading_trivia": declaration.leading_trivia,
            "header_code": declaration.header_code,
        }

    def dump_edits(self, result: FixResult) -> str:
        payload = {
            "edits": [
                {
                    "location": self.location_to_dict(edit.original.location),
                    "original_header": edit.original.header_code,
                    "declaration": self.declaration_to_dict(edit.new_declaration),
                }
                for edit in result.edits
            ],
            "unmatched": [self.location_to_dict(plan.target) for plan in result.unmatched],
        }
        return json.dumps(payload, indent=2)
