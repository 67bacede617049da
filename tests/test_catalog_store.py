"""Tests for CatalogStore: layout, strict and soft loaders, writers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from linguimulti.catalog.store import CatalogStore
from linguimulti.catalog.types import CatalogEntry, Origin
from linguimulti.constants import COMPLETE_CATALOG_NAME
from linguimulti.errors import CatalogCorruptedError, CatalogMissingError, LocaleDirectoryError


@pytest.fixture
def store(tmp_path: Path) -> CatalogStore:
    for locale in ("fr", "en", "de"):
        (tmp_path / "locale" / locale).mkdir(parents=True)
    return CatalogStore(tmp_path / "locale")


class TestLayout:
    """Locale listing and file paths."""

    def test_list_locales_sorted(self, store: CatalogStore) -> None:
        assert store.list_locales() == ("de", "en", "fr")

    def test_list_locales_skips_files_and_build_dir(self, store: CatalogStore) -> None:
        (store.locales_dir / "_build").mkdir()
        (store.locales_dir / "README.md").write_text("notes", encoding="utf-8")
        assert store.list_locales() == ("de", "en", "fr")

    def test_list_locales_missing_dir(self, tmp_path: Path) -> None:
        with pytest.raises(LocaleDirectoryError, match="locale directory does not exist"):
            CatalogStore(tmp_path / "nope").list_locales()

    def test_list_locales_path_is_a_file(self, tmp_path: Path) -> None:
        locales_file = tmp_path / "locale"
        locales_file.write_text("", encoding="utf-8")
        with pytest.raises(LocaleDirectoryError, match="locale directory does not exist"):
            CatalogStore(locales_file).list_locales()

    def test_catalog_paths(self, store: CatalogStore) -> None:
        assert store.minimal_path("fr") == store.locales_dir / "fr" / "messages.json"
        assert store.complete_path("fr") == store.locales_dir / "fr" / "messages.metadata.json"

    def test_artifact_path_for_complete_catalog_has_no_prefix(self, store: CatalogStore) -> None:
        assert store.artifact_path("fr", COMPLETE_CATALOG_NAME) == (
            store.locales_dir / "fr" / "messages.js"
        )

    def test_artifact_path_for_sub_catalog(self, store: CatalogStore) -> None:
        assert store.artifact_path("fr", "widgets") == (
            store.locales_dir / "fr" / "widgets.messages.js"
        )


class TestStrictLoaders:
    """load_complete / load_minimal fail loudly."""

    def test_load_minimal(self, store: CatalogStore) -> None:
        store.minimal_path("fr").write_text('{"a": "b"}', encoding="utf-8")
        assert store.load_minimal("fr") == {"a": "b"}

    def test_load_complete(self, store: CatalogStore) -> None:
        store.complete_path("fr").write_text(
            '{"a": {"translation": "b", "origin": [["x.js"]]}}', encoding="utf-8"
        )
        assert store.load_complete("fr") == {
            "a": CatalogEntry(translation="b", origin=(Origin("x.js"),))
        }

    def test_missing_file(self, store: CatalogStore) -> None:
        with pytest.raises(CatalogMissingError, match="file missing: ") as exc_info:
            store.load_minimal("fr")
        assert exc_info.value.path == store.minimal_path("fr")

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"a": 1}', ""])
    def test_corrupted_minimal(self, store: CatalogStore, content: str) -> None:
        store.minimal_path("fr").write_text(content, encoding="utf-8")
        with pytest.raises(CatalogCorruptedError, match="file is corrupted: "):
            store.load_minimal("fr")

    def test_corrupted_complete_entry(self, store: CatalogStore) -> None:
        store.complete_path("fr").write_text('{"a": {"origin": "x.js"}}', encoding="utf-8")
        with pytest.raises(CatalogCorruptedError):
            store.load_complete("fr")


class TestSoftLoaders:
    """*_or_empty loaders fall back to {}."""

    def test_missing_files_are_empty(self, store: CatalogStore) -> None:
        assert store.load_translations_or_empty("fr") == {}
        assert store.load_minimal_or_empty("fr") == {}

    def test_corrupt_files_are_empty(self, store: CatalogStore) -> None:
        store.minimal_path("fr").write_text("{oops", encoding="utf-8")
        store.complete_path("fr").write_text("[]", encoding="utf-8")
        assert store.load_translations_or_empty("fr") == {}
        assert store.load_minimal_or_empty("fr") == {}

    def test_valid_files_load(self, store: CatalogStore) -> None:
        store.minimal_path("fr").write_text('{"a": "b"}', encoding="utf-8")
        assert store.load_minimal_or_empty("fr") == {"a": "b"}

    def test_translations_skip_malformed_entries(self, store: CatalogStore) -> None:
        store.complete_path("fr").write_text(
            json.dumps({
                "bad_origin": {"translation": "x", "origin": [[123]]},
                "bad_translation": {"translation": 7, "origin": [["a.js"]]},
                "not_an_object": "Bonjour",
                "untranslated": {"origin": [["a.js"]]},
                "good": {"translation": "Salut", "origin": [["a.js"]]},
            }),
            encoding="utf-8",
        )
        assert store.load_translations_or_empty("fr") == {
            "bad_origin": "x",
            "untranslated": "",
            "good": "Salut",
        }


class TestWriters:
    """write_catalogs / write_artifact."""

    def test_write_catalogs(self, store: CatalogStore) -> None:
        complete = {"a": CatalogEntry(translation="", origin=(Origin("src/App.js"),))}
        store.write_catalogs("fr", complete, {"a": ""})

        written = json.loads(store.complete_path("fr").read_text(encoding="utf-8"))
        assert written == {"a": {"translation": "", "origin": [["src/App.js"]]}}
        assert json.loads(store.minimal_path("fr").read_text(encoding="utf-8")) == {"a": ""}

    def test_write_catalogs_format(self, store: CatalogStore) -> None:
        store.write_catalogs("fr", {}, {"clé": "valeur"})
        text = store.minimal_path("fr").read_text(encoding="utf-8")
        assert text == '{\n  "clé": "valeur"\n}\n'

    def test_written_catalogs_load_back(self, store: CatalogStore) -> None:
        complete = {"a": CatalogEntry(translation="b", origin=(Origin("x.js", 1),))}
        store.write_catalogs("fr", complete, {"a": "b"})
        assert store.load_complete("fr") == complete
        assert store.load_minimal("fr") == {"a": "b"}

    def test_write_artifact(self, store: CatalogStore) -> None:
        path = store.write_artifact("fr", "widgets", "module.exports={}")
        assert path == store.locales_dir / "fr" / "widgets.messages.js"
        assert path.read_text(encoding="utf-8") == "module.exports={}"
