#!/usr/bin/env python3
"""Tests for JSON helpers."""

import json

import pytest

from centwise.core.json_utils import format_json, money_default, read_json, write_json
from centwise.core.money import Money


class TestMoneyJson:
    """Test Money serialization."""

    @pytest.mark.currency
    def test_format_json_serializes_money(self):
        """Test Money values become their major-unit floats."""
        data = {"total": Money(12.34), "shares": Money(100).distribute(3)}
        assert json.loads(format_json(data)) == {"total": 12.34, "shares": [33.34, 33.33, 33.33]}

    @pytest.mark.currency
    def test_json_uses_raw_value_not_canonical_string(self):
        """Test the increment does not affect the JSON value."""
        assert json.loads(format_json(Money(1.03, increment=0.05))) == 1.03

    def test_money_default_rejects_other_objects(self):
        """Test unknown objects still fail to serialize."""
        with pytest.raises(TypeError):
            money_default(object())
        with pytest.raises(TypeError):
            format_json({"when": object()})

    def test_format_json_is_pretty_printed(self):
        """Test output is indented."""
        assert format_json({"a": 1}) == '{\n  "a": 1\n}'

    def test_write_and_read_json(self, tmp_path):
        """Test writing Money values to disk and reading them back."""
        path = tmp_path / "nested" / "totals.json"
        write_json(path, {"total": Money("$1,234.56")}, sort_keys=True)
        assert read_json(path) == {"total": 1234.56}
