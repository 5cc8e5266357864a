#!/usr/bin/env python3
"""
DXFPARSER EXPORTER - Decoded Section Dump
-----------------------------------------
Renders the decoded section map as YAML so downstream tools can consume
it. Sections and variables keep their encounter order.

Author: DXFParser Team
Date: 2026-10-18
"""

import io
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from dxfparser.core.models import DecodedSections, VariableMap


class SectionExporter:
    """
    The Reporter: converts decoded sections to YAML strings.
    """

    def __init__(self):
        self.yaml = YAML(typ='rt')
        self.yaml.indent(mapping=2, sequence=4, offset=2)
        self.yaml.width = 4096

    def _variables_to_map(self, variables: VariableMap) -> CommentedMap:
        out = CommentedMap()
        for name, props in variables.items():
            seq = CommentedSeq()
            for prop in props:
                item = CommentedMap()
                item["type"] = prop.type.value
                item["value"] = prop.value
                seq.append(item)
            out[name] = seq
        return out

    def to_document(self, decoded: DecodedSections, source: Optional[str] = None) -> CommentedMap:
        doc = CommentedMap()
        for section_name, variables in decoded.items():
            doc[section_name] = self._variables_to_map(variables)
        if source:
            doc.yaml_set_start_comment(f"Decoded from {source}")
        return doc

    def export(self, decoded: DecodedSections, source: Optional[str] = None) -> str:
        """
        Exports the decoded section map into a single YAML string.
        """
        stream = io.StringIO()
        self.yaml.dump(self.to_document(decoded, source), stream)
        return stream.getvalue()
