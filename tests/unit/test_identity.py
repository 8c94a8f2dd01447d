import pytest

from paysync.roster.identity import normalize_identity


class TestNormalizeIdentity:
    @pytest.mark.parametrize(
        "raw",
        ["ID100001", "  ID100001  ", "ID100001\n", "ID100001\r\n", "ID 100 001", "  ID100001\n\r  ", "\tID1000\t01"],
    )
    def test_whitespace_variants_normalize_equal(self, raw: str) -> None:
        assert normalize_identity(raw) == "ID100001"

    @pytest.mark.parametrize("raw", ["", "   ", "\n", " a b ", "ID 1\n2", "x y"])
    def test_is_idempotent(self, raw: str) -> None:
        once = normalize_identity(raw)
        assert normalize_identity(once) == once

    def test_empty_input_yields_empty_key(self) -> None:
        assert normalize_identity("") == ""

    def test_none_is_treated_as_empty(self) -> None:
        assert normalize_identity(None) == ""

    def test_keeps_case_and_punctuation(self) -> None:
        assert normalize_identity(" ab-12/Cd ") == "ab-12/Cd"
