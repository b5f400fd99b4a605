"""Tests for UnfoldingScheme."""

import pytest

from quantics import UnfoldingScheme, UnsupportedSchemeError, as_unfolding_scheme


class TestUnfoldingScheme:
    """Tests for the UnfoldingScheme enum."""

    def test_values(self):
        assert UnfoldingScheme.FUSED == 0
        assert UnfoldingScheme.INTERLEAVED == 1
        assert len(UnfoldingScheme) == 2

    def test_str(self):
        assert str(UnfoldingScheme.FUSED) == "fused"
        assert str(UnfoldingScheme.INTERLEAVED) == "interleaved"

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("fused", UnfoldingScheme.FUSED),
            ("Fused", UnfoldingScheme.FUSED),
            ("interleaved", UnfoldingScheme.INTERLEAVED),
            ("INTERLEAVED", UnfoldingScheme.INTERLEAVED),
        ],
    )
    def test_from_name(self, name, expected):
        assert UnfoldingScheme.from_name(name) is expected

    def test_from_name_unknown(self):
        with pytest.raises(UnsupportedSchemeError):
            UnfoldingScheme.from_name("zigzag")

    def test_unsupported_is_value_error(self):
        with pytest.raises(ValueError):
            UnfoldingScheme.from_name("")


class TestDefault:
    """Default scheme and its environment override."""

    def test_default_is_fused(self, monkeypatch):
        monkeypatch.delenv("QUANTICS_UNFOLDING", raising=False)
        assert UnfoldingScheme.default() is UnfoldingScheme.FUSED

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("QUANTICS_UNFOLDING", "interleaved")
        assert UnfoldingScheme.default() is UnfoldingScheme.INTERLEAVED

    def test_blank_environment_ignored(self, monkeypatch):
        monkeypatch.setenv("QUANTICS_UNFOLDING", "  ")
        assert UnfoldingScheme.default() is UnfoldingScheme.FUSED

    def test_invalid_environment(self, monkeypatch):
        monkeypatch.setenv("QUANTICS_UNFOLDING", "zigzag")
        with pytest.raises(UnsupportedSchemeError, match="QUANTICS_UNFOLDING"):
            UnfoldingScheme.default()


class TestAsUnfoldingScheme:
    """Tests for as_unfolding_scheme."""

    def test_member(self):
        assert as_unfolding_scheme(UnfoldingScheme.INTERLEAVED) is UnfoldingScheme.INTERLEAVED

    def test_name(self):
        assert as_unfolding_scheme("interleaved") is UnfoldingScheme.INTERLEAVED

    def test_none_uses_default(self, monkeypatch):
        monkeypatch.delenv("QUANTICS_UNFOLDING", raising=False)
        assert as_unfolding_scheme(None) is UnfoldingScheme.FUSED

    @pytest.mark.parametrize("value", [0, 1.5, object()])
    def test_other_types_rejected(self, value):
        with pytest.raises(UnsupportedSchemeError):
            as_unfolding_scheme(value)
