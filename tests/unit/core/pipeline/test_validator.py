from __future__ import annotations

"""
Unit tests for the Option Validation Service.

Verifies type coercion, default injection and the strict/lenient
handling of invalid byte ceilings.
"""

import pytest

from unpackedsize.core.pipeline.validator import parse_byte_count, validate_options
from unpackedsize.domain.config import AnalyzeOptions
from unpackedsize.domain.errors import ConfigurationError


def test_none_yields_defaults():
    options, warnings = validate_options(None)

    assert options == AnalyzeOptions()
    assert options.fail_if_exceeds_bytes is None
    assert options.json_output is False
    assert warnings == []


def test_valid_values_pass_through():
    options, _ = validate_options({"fail_if_exceeds_bytes": 1_048_576, "json_output": True})

    assert options == AnalyzeOptions(fail_if_exceeds_bytes=1_048_576, json_output=True)


def test_numeric_string_ceiling_is_parsed():
    options, _ = validate_options({"fail_if_exceeds_bytes": " 2048 "})

    assert options.fail_if_exceeds_bytes == 2048


@pytest.mark.parametrize("bad", ["abc", "12kb", "-5", "1.5", "", True, 3.0, -1])
def test_invalid_ceiling_raises_in_strict_mode(bad):
    with pytest.raises(ConfigurationError) as exc:
        validate_options({"fail_if_exceeds_bytes": bad}, strict=True)

    assert exc.value.field == "fail_if_exceeds_bytes"


def test_invalid_ceiling_falls_back_in_lenient_mode():
    options, warnings = validate_options({"fail_if_exceeds_bytes": "abc"}, strict=False)

    assert options.fail_if_exceeds_bytes is None
    assert len(warnings) == 1
    assert "fail_if_exceeds_bytes" in warnings[0]


def test_lenient_bool_coercion():
    options, warnings = validate_options({"json_output": "yes"}, strict=False)

    assert options.json_output is True
    assert "converted" in warnings[0]


def test_strict_mode_rejects_string_bool():
    with pytest.raises(ConfigurationError):
        validate_options({"json_output": "yes"}, strict=True)


def test_unknown_keys_are_reported():
    _, warnings = validate_options({"colour": True})

    assert warnings == ["Unknown option 'colour' ignored."]


def test_non_mapping_is_rejected():
    with pytest.raises(ConfigurationError):
        validate_options(["--json"], strict=True)

    options, warnings = validate_options(["--json"], strict=False)
    assert options == AnalyzeOptions()
    assert warnings


def test_parse_byte_count():
    assert parse_byte_count("0") == 0
    assert parse_byte_count("1_000_000") == 1_000_000
    with pytest.raises(ConfigurationError):
        parse_byte_count("ten")
