"""Tests for validation helpers."""

import pytest

from remote_tunnels.common.utils import (
    MAX_PORT,
    MIN_PORT,
    parse_port,
    validate_non_empty_string,
    validate_port,
)


class TestValidatePort:
    @pytest.mark.parametrize("port", [MIN_PORT, 3000, MAX_PORT])
    def test_valid(self, port):
        validate_port(port)

    @pytest.mark.parametrize("port", [0, -1, MAX_PORT + 1, True, "80"])
    def test_invalid(self, port):
        with pytest.raises(ValueError, match="must be between"):
            validate_port(port)

    def test_custom_name_in_message(self):
        with pytest.raises(ValueError, match="Local port"):
            validate_port(0, "Local port")


class TestValidateNonEmptyString:
    def test_strips(self):
        assert validate_non_empty_string("  3000 ", "Remote") == "3000"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_empty(self, value):
        with pytest.raises(ValueError, match="Remote cannot be empty"):
            validate_non_empty_string(value, "Remote")


class TestParsePort:
    def test_numeric(self):
        assert parse_port("4001") == 4001

    def test_non_numeric(self):
        with pytest.raises(ValueError, match="numeric"):
            parse_port("web")

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="must be between"):
            parse_port("70000")
