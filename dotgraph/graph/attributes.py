"""Attribute list formatting for DOT statements."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

# Line break marker understood by GraphViz inside labels.
LABEL_LINE_BREAK = "\\N"


def json_literal(value: Any) -> str:
    """Encode a single attribute value as a JSON literal."""
    return json.dumps(value, ensure_ascii=False, default=str)


def escape_label(label: Any) -> str:
    """Quote a label, escaping each ``\\N`` separated segment on its own."""
    segments = str(label).split(LABEL_LINE_BREAK)
    escaped = [json.dumps(segment, ensure_ascii=False)[1:-1] for segment in segments]
    return '"' + LABEL_LINE_BREAK.join(escaped) + '"'


class AttributeFormatter:
    """Turns attribute mappings into DOT ``name=value`` lists."""

    def format_value(self, name: str, value: Any) -> str:
        if name == "label":
            return escape_label(value)
        return json_literal(value)

    def format_pairs(self, attributes: Mapping[str, Any]) -> list[str]:
        """Format every attribute as a ``name=value`` pair, in mapping order."""
        return [f"{name}={self.format_value(name, value)}" for name, value in attributes.items()]

    def format_list(self, attributes: Mapping[str, Any]) -> str:
        """Format a bracketed attribute list (``[]`` when empty)."""
        return "[" + ",".join(self.format_pairs(attributes)) + "]"

    def format_statement(self, name: str, value: Any) -> str:
        """Format a graph level ``name=value;`` statement."""
        return f"{name}={self.format_value(name, value)};"


default_formatter = AttributeFormatter()
