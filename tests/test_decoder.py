#!/usr/bin/env python3
"""
DXFPARSER DECODER SUITE
-----------------------
HEADER variable chunking, value pairing and the typed failures raised on
malformed sections.

Author: DXFParser Team
Date: 2026-10-18
"""

import pytest

from dxfparser.core.errors import MalformedGroupCodeError, TruncatedMarkerError
from dxfparser.core.models import DXFProp, PropType, SECTION_ORDER
from dxfparser.parsing.decoder import VariableDecoder, decode
from dxfparser.rules.group_codes import GroupCodeTable

S = PropType.STRING
U = PropType.UNDEFINED

HEADER_LINES = [
    "9", "$ACADVER", "1", "AC1015",
    "9", "$INSBASE", "10", "0.0", "20", "0.0", "30", "0.0",
    "9", "$HANDSEED", "5", "20000",
    "9", "$MENU", "1", ".",
]


def test_single_variable():
    assert decode("HEADER", ["9", "$ACADVER", "1", "AC1015"]) == {
        "$ACADVER": [DXFProp(S, "AC1015")]
    }


def test_two_variables():
    assert decode("HEADER", ["9", "$A", "1", "X", "9", "$B", "1", "Y"]) == {
        "$A": [DXFProp(S, "X")],
        "$B": [DXFProp(S, "Y")],
    }


def test_realistic_header():
    variables = decode("HEADER", HEADER_LINES)

    assert list(variables) == ["$ACADVER", "$INSBASE", "$HANDSEED", "$MENU"]
    assert variables["$INSBASE"] == [DXFProp(U, "0.0"), DXFProp(U, "0.0"), DXFProp(U, "0.0")]
    assert variables["$HANDSEED"] == [DXFProp(S, "20000")]


@pytest.mark.parametrize("name", [n for n in SECTION_ORDER if n != "HEADER"] + ["header", "UNKNOWN"])
def test_other_sections_are_not_decoded(name):
    assert decode(name, HEADER_LINES) == {}


def test_empty_header():
    assert decode("HEADER", []) == {}


def test_lines_before_first_marker_are_ignored():
    assert decode("HEADER", ["999", "comment", "9", "$A", "1", "X"]) == {"$A": [DXFProp(S, "X")]}


def test_single_value_line_yields_no_records():
    """An odd chunk of one line has data but no complete pair."""
    assert decode("HEADER", ["9", "$A", "1"]) == {"$A": []}


def test_odd_trailing_line_is_dropped():
    assert decode("HEADER", ["9", "$A", "1", "X", "70"]) == {"$A": [DXFProp(S, "X")]}


def test_marker_followed_only_by_name():
    assert decode("HEADER", ["9", "$A", "9", "$B", "1", "Y"]) == {
        "$A": [],
        "$B": [DXFProp(S, "Y")],
    }


def test_repeated_variable_last_write_wins():
    variables = decode("HEADER", ["9", "$A", "1", "X", "9", "$B", "1", "Y", "9", "$A", "1", "Z", "2", "W"])

    assert list(variables) == ["$A", "$B"]
    assert variables["$A"] == [DXFProp(S, "Z"), DXFProp(S, "W")]


def test_value_strings_round_trip():
    """Concatenated values reproduce every value line of the chunks."""
    variables = decode("HEADER", HEADER_LINES)
    values = [p.value for props in variables.values() for p in props]
    assert values == ["AC1015", "0.0", "0.0", "0.0", "20000", "."]


def test_decode_is_idempotent():
    assert decode("HEADER", HEADER_LINES) == decode("HEADER", HEADER_LINES)


def test_input_is_not_mutated():
    lines = list(HEADER_LINES)
    decode("HEADER", lines)
    assert lines == HEADER_LINES


def test_malformed_group_code():
    with pytest.raises(MalformedGroupCodeError) as exc:
        decode("HEADER", ["9", "$A", "abc", "X"])
    assert exc.value.line == "abc"
    assert exc.value.line_no == 2
    assert exc.value.section == "HEADER"
    assert "abc" in str(exc.value)


def test_malformed_group_code_position_uses_offset():
    decoder = VariableDecoder()
    with pytest.raises(MalformedGroupCodeError) as exc:
        decoder.decode("HEADER", ["9", "$A", "1", "X", "1.5", "Y"], offset=100)
    assert exc.value.line_no == 104


def test_truncated_marker():
    with pytest.raises(TruncatedMarkerError) as exc:
        VariableDecoder().decode("HEADER", ["9", "$A", "1", "X", "9"], offset=10)
    assert exc.value.line_no == 14
    assert exc.value.section == "HEADER"


def test_marker_value_is_treated_as_marker():
    """A value line reading '9' splits the variable like a real marker does."""
    variables = decode("HEADER", ["9", "$A", "70", "9", "$B", "1", "Y"])
    assert variables == {"$A": [], "$B": [DXFProp(S, "Y")]}


def test_custom_table_is_used():
    table = GroupCodeTable(((10, 39, PropType.DECIMAL),))
    decoder = VariableDecoder(table)
    assert decoder.decode("HEADER", ["9", "$INSBASE", "10", "0.0", "1", "X"]) == {
        "$INSBASE": [DXFProp(PropType.DECIMAL, "0.0"), DXFProp(U, "X")]
    }
