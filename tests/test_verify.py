"""Tests for strict-mode completeness verification."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from linguimulti.errors import MissingTranslationsError
from linguimulti.verify import (
    find_missing_translations,
    requires_verification,
    verify_no_missing_translations,
)


class TestFindMissingTranslations:
    def test_empty_values_reported_in_order(self) -> None:
        assert find_missing_translations({"b": "", "a": "hi", "c": ""}) == ("b", "c")

    def test_whitespace_is_a_translation(self) -> None:
        assert find_missing_translations({"a": " "}) == ()


class TestStrictGate:
    """verify_no_missing_translations and requires_verification."""

    def test_reports_count_and_locale(self) -> None:
        with pytest.raises(MissingTranslationsError, match=r"^Missing 1 translations in fr$") as e:
            verify_no_missing_translations({"a": "hi", "b": ""}, "fr")
        assert e.value.locale == "fr"
        assert e.value.count == 1
        assert e.value.missing == ("b",)

    def test_complete_catalog_passes(self) -> None:
        verify_no_missing_translations({"a": "hi"}, "fr")

    def test_empty_catalog_passes(self) -> None:
        verify_no_missing_translations({}, "fr")

    def test_source_locale_exempt(self) -> None:
        assert not requires_verification(True, "en", "en")

    def test_non_strict_never_verifies(self) -> None:
        assert not requires_verification(False, "fr", "en")

    def test_strict_non_source_verifies(self) -> None:
        assert requires_verification(True, "fr", "en")

    @given(catalog=st.dictionaries(st.text(min_size=1), st.text(max_size=3)))
    def test_fails_iff_some_translation_empty(self, catalog: dict[str, str]) -> None:
        expected = sum(1 for value in catalog.values() if value == "")
        if expected:
            with pytest.raises(MissingTranslationsError) as e:
                verify_no_missing_translations(catalog, "de")
            assert e.value.count == expected
        else:
            verify_no_missing_translations(catalog, "de")
