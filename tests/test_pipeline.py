#!/usr/bin/env python3
"""
DXFPARSER PIPELINE SUITE
------------------------
End-to-end runs from raw text through segmentation, validation and
decoding, plus the YAML export of the result.

Author: DXFParser Team
Date: 2026-10-18
"""

import pytest
from ruamel.yaml import YAML

from dxfparser.core.config import ParserConfig
from dxfparser.core.errors import InputTooLargeError, MalformedGroupCodeError, UnbalancedSectionsError
from dxfparser.core.models import DXFProp, PropType
from dxfparser.parsing.exporter import SectionExporter
from dxfparser.parsing.lexer import DXFLexer
from dxfparser.parsing.pipeline import ParsePipeline

SAMPLE_DXF = """  0
SECTION
  2
HEADER
  9
$ACADVER
  1
AC1015
  9
$INSBASE
 10
0.0
 20
0.0
 30
0.0
  0
ENDSEC
  0
SECTION
  2
TABLES
  0
TABLE
  2
LAYER
  0
ENDTAB
  0
ENDSEC
  0
SECTION
  2
ENTITIES
  0
LINE
  8
0
  0
ENDSEC
  0
EOF
"""


def test_lexer_trims_and_normalizes():
    lexer = DXFLexer()
    assert lexer.split("\ufeff  0\r\nSECTION  \r  2\nHEADER\n") == ["0", "SECTION", "2", "HEADER"]
    assert lexer.split("") == []
    assert lexer.split("0\n\nEOF") == ["0", "", "EOF"]


def test_lexer_reads_file(tmp_path):
    path = tmp_path / "sample.dxf"
    path.write_text(SAMPLE_DXF, encoding="utf-8")
    lines = DXFLexer().read(path)
    assert lines[:4] == ["0", "SECTION", "2", "HEADER"]
    assert lines[-1] == "EOF"


def test_full_drawing():
    context = ParsePipeline().run_text(SAMPLE_DXF)

    assert context.ok
    assert list(context.sections) == ["HEADER", "TABLES", "ENTITIES"]
    assert list(context.decoded) == ["HEADER", "TABLES", "ENTITIES"]
    assert context.decoded["TABLES"] == {}
    assert context.decoded["ENTITIES"] == {}
    assert context.header["$ACADVER"] == [DXFProp(PropType.STRING, "AC1015")]
    assert [p.type for p in context.header["$INSBASE"]] == [PropType.UNDEFINED] * 3
    assert context.variable_count == 2
    assert context.warnings == []


def test_acadver_scenario():
    lines = ["0", "SECTION", "2", "HEADER", "9", "$ACADVER", "1", "AC1015", "0", "ENDSEC"]
    context = ParsePipeline().run(lines)

    assert list(context.sections["HEADER"].lines) == ["9", "$ACADVER", "1", "AC1015"]
    assert context.decoded == {"HEADER": {"$ACADVER": [DXFProp(PropType.STRING, "AC1015")]}}


def test_malformed_section_is_isolated():
    lines = ["0", "SECTION", "2", "HEADER", "9", "$A", "abc", "X", "0", "ENDSEC",
             "0", "SECTION", "2", "ENTITIES", "0", "ENDSEC", "0", "EOF"]
    context = ParsePipeline().run(lines)

    assert not context.ok
    assert "HEADER" not in context.decoded
    assert context.decoded["ENTITIES"] == {}
    err = context.errors["HEADER"]
    assert isinstance(err, MalformedGroupCodeError)
    # Position is reported against the source lines
    assert err.line_no == 6
    assert lines[err.line_no] == "abc"


def test_malformed_section_propagates_without_isolation():
    lines = ["0", "SECTION", "2", "HEADER", "9", "$A", "abc", "X", "0", "ENDSEC", "0", "EOF"]
    pipeline = ParsePipeline(ParserConfig(isolate_sections=False))
    with pytest.raises(MalformedGroupCodeError):
        pipeline.run(lines)


def test_unbalanced_sections_propagate():
    with pytest.raises(UnbalancedSectionsError):
        ParsePipeline().run(["0", "SECTION", "2", "HEADER", "9", "$A", "1", "X"])


def test_line_ceiling():
    pipeline = ParsePipeline(ParserConfig(max_lines=5))
    with pytest.raises(InputTooLargeError) as exc:
        pipeline.run_text(SAMPLE_DXF)
    assert exc.value.limit == 5


def test_nonstandard_section_warns():
    lines = ["0", "SECTION", "2", "CUSTOM", "0", "ENDSEC", "0", "EOF"]
    context = ParsePipeline().run(lines)
    assert context.decoded == {"CUSTOM": {}}
    assert any("CUSTOM" in w for w in context.warnings)
    assert context.structural_ok is True
    assert context.ok


def test_overlapping_ranges_mark_context_not_ok():
    lines = ["0", "SECTION", "2", "HEADER",
             "0", "SECTION", "2", "ENTITIES", "0", "ENDSEC",
             "0", "POINT", "0", "ENDSEC", "0", "EOF"]
    context = ParsePipeline().run(lines)

    assert context.errors == {}
    assert context.structural_ok is False
    assert not context.ok


def test_export_yaml():
    context = ParsePipeline().run_text(SAMPLE_DXF)
    text = SectionExporter().export(context.decoded, source="sample.dxf")

    assert text.startswith("# Decoded from sample.dxf")
    data = YAML(typ="safe").load(text)
    assert list(data) == ["HEADER", "TABLES", "ENTITIES"]
    assert data["HEADER"]["$ACADVER"] == [{"type": "STRING", "value": "AC1015"}]
    assert data["HEADER"]["$INSBASE"][0] == {"type": "UNDEFINED", "value": "0.0"}
    assert data["ENTITIES"] == {}
