"""Tests for catalog derivation from flag asset listings."""

import pytest

from worldflags.assets import AssetKey
from worldflags.catalog import FlagCatalog, build_catalog, sort_catalog
from worldflags.catalog.scanner import AssetScanner
from worldflags.errors import DirectoryUnavailable, WorldFlagsError


# ---------------------------------------------------------------------------
# build_catalog
# ---------------------------------------------------------------------------


class TestBuildCatalog:
    def test_keeps_only_3x_png_entries_in_order(self):
        listing = ["France@3x.png", "readme.txt", "Japan@3x.png"]
        assert build_catalog(listing) == ["France", "Japan"]

    def test_empty_listing(self):
        assert build_catalog([]) == []

    def test_splits_on_first_delimiter(self):
        """Double-delimited names keep only the text before the first '@'."""
        assert build_catalog(["Flag@2x@3x.png"]) == ["Flag"]

    def test_ignores_other_resolutions_and_case(self):
        listing = ["Spain@2x.png", "Spain.png", "Spain@3x.PNG", "Spain@3x.png.bak", "Spain@3x.png"]
        assert build_catalog(listing) == ["Spain"]

    def test_preserves_input_order_and_duplicates(self):
        listing = ["US@3x.png", "Estonia@3x.png", "US@3x.png"]
        assert build_catalog(listing) == ["US", "Estonia", "US"]

    def test_accepts_any_iterable(self):
        assert build_catalog(name for name in ("Monaco@3x.png",)) == ["Monaco"]

    def test_bare_suffix_yields_empty_identifier(self):
        assert build_catalog(["@3x.png"]) == [""]


class TestSortCatalog:
    def test_name_order_is_case_insensitive(self):
        assert sort_catalog(["spain", "France", "estonia"], "name") == [
            "estonia",
            "France",
            "spain",
        ]

    def test_listing_order_is_unchanged(self):
        assert sort_catalog(["US", "Estonia"], "listing") == ["US", "Estonia"]

    def test_unknown_order_raises(self):
        with pytest.raises(ValueError):
            sort_catalog(["US"], "random")


# ---------------------------------------------------------------------------
# AssetScanner / FlagCatalog
# ---------------------------------------------------------------------------


class TestAssetScanner:
    def test_lists_files_only(self, tmp_path):
        (tmp_path / "France@3x.png").write_bytes(b"")
        (tmp_path / "Nested@3x.png").mkdir()

        assert AssetScanner(tmp_path).list_names() == ["France@3x.png"]

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(DirectoryUnavailable) as exc_info:
            AssetScanner(tmp_path / "missing").list_names()
        assert exc_info.value.path == tmp_path / "missing"
        assert isinstance(exc_info.value, WorldFlagsError)

    def test_file_instead_of_directory_raises(self, tmp_path):
        path = tmp_path / "flags"
        path.write_text("")
        with pytest.raises(DirectoryUnavailable):
            AssetScanner(path).list_names()


class TestFlagCatalog:
    def test_build_sorted_by_name(self, flags_dir):
        (flags_dir / "Estonia@3x.png").write_bytes(b"")
        catalog = FlagCatalog(flags_dir).build()

        assert [key.name for key in catalog] == ["Estonia", "France", "Italy"]
        assert len(catalog) == 3
        assert catalog[1] == AssetKey("France")

    def test_build_listing_order_keeps_all_entries(self, flags_dir):
        catalog = FlagCatalog(flags_dir, order="listing").build()
        assert sorted(key.name for key in catalog) == ["France", "Italy"]

    def test_index_of(self, flags_dir):
        catalog = FlagCatalog(flags_dir).build()
        assert catalog.index_of("Italy") == 1
        assert catalog.index_of("Japan") is None

    def test_empty_directory(self, tmp_path):
        catalog = FlagCatalog(tmp_path).build()
        assert len(catalog) == 0
        assert catalog.keys == []

    def test_unbuilt_catalog_is_empty(self, flags_dir):
        assert len(FlagCatalog(flags_dir)) == 0

    def test_keys_returns_a_copy(self, flags_dir):
        catalog = FlagCatalog(flags_dir).build()
        catalog.keys.clear()
        assert len(catalog) == 2

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(DirectoryUnavailable):
            FlagCatalog(tmp_path / "missing").build()
