"""
Tests for the listing engine.
"""

import re
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from simonsays.core.errors import BadRequest
from simonsays.modules.listing.schemas import ListedItem, ListRequest, SortKey
from simonsays.modules.listing.service import HEADER, ListingService, parse_sort_key

RFC3339 = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(Z|[+-]\d{2}:\d{2})$")


def _names(root: Path, **kwargs) -> list[str]:
    return [i.name for i in ListingService(root).run(ListRequest(root=root, **kwargs))]


class TestParseSortKey:
    @pytest.mark.parametrize("value", ["name", "size", "time"])
    def test_known_keys(self, value):
        assert parse_sort_key(value) is SortKey(value)

    def test_unknown_key(self):
        with pytest.raises(BadRequest, match="unknown sort option: date"):
            parse_sort_key("date")


class TestListingService:
    def test_sort_by_size(self, tmp_path: Path, make_file):
        make_file(tmp_path / "a.txt", size=10)
        make_file(tmp_path / "b.txt", size=5)

        assert _names(tmp_path, sort=SortKey.size) == ["b.txt", "a.txt"]

    def test_sort_by_name_default(self, tmp_path: Path, make_file):
        for name in ("b", "C", "a"):
            make_file(tmp_path / name)

        # Plain code-point order: upper case before lower case.
        assert _names(tmp_path) == ["C", "a", "b"]

    def test_sort_by_time(self, tmp_path: Path, make_file):
        make_file(tmp_path / "new.txt", mtime=datetime(2024, 1, 2))
        make_file(tmp_path / "old.txt", mtime=datetime(2020, 1, 1))
        make_file(tmp_path / "mid.txt", mtime=datetime(2022, 6, 1))

        assert _names(tmp_path, sort=SortKey.time) == ["old.txt", "mid.txt", "new.txt"]

    def test_flat_excludes_subdirectories(self, mixed_tree: Path):
        assert _names(mixed_tree) == ["README", "notes.txt", "photo.jpg"]

    def test_recursive_includes_nested_files(self, mixed_tree: Path):
        names = _names(mixed_tree, sort=SortKey.size, recursive=True)

        assert names == ["README", "photo.jpg", "notes.txt", "report.pdf"]

    def test_report_lines(self, tmp_path: Path, make_file):
        make_file(tmp_path / "a.txt", size=10, mtime=datetime(2024, 3, 5, 8, 15, 30))

        lines = ListingService(tmp_path).report(ListRequest(root=tmp_path))

        assert lines[0] == HEADER == "Files:"
        match = re.fullmatch(r"- a\.txt \(Size: 10 bytes, Modified: (.+)\)", lines[1])
        assert match
        stamp = match.group(1)
        assert RFC3339.match(stamp)
        assert stamp.startswith("2024-03-05T08:15:30")

    def test_empty_directory(self, tmp_path: Path):
        assert ListingService(tmp_path).report(ListRequest(root=tmp_path)) == ["Files:"]

    def test_modified_is_timezone_aware(self, tmp_path: Path, make_file):
        make_file(tmp_path / "a.txt")

        [item] = ListingService(tmp_path).run(ListRequest(root=tmp_path))

        assert item.modified.tzinfo is not None

    def test_dangling_symlink_is_listed(self, tmp_path: Path, make_file):
        make_file(tmp_path / "a.txt")
        (tmp_path / "link.lnk").symlink_to(tmp_path / "missing")

        assert _names(tmp_path) == ["a.txt", "link.lnk"]

    def test_symlink_to_directory_counts_as_file(self, tmp_path: Path, make_file):
        make_file(tmp_path / "real" / "inner.txt")
        (tmp_path / "alias").symlink_to(tmp_path / "real", target_is_directory=True)

        assert _names(tmp_path) == ["alias"]
        assert _names(tmp_path, recursive=True) == ["alias", "inner.txt"]


class TestListedItemLine:
    def test_utc_is_written_as_z(self):
        item = ListedItem(
            name="a.txt", size=3, modified=datetime(2024, 3, 5, 8, 15, 30, tzinfo=timezone.utc)
        )

        assert item.line() == "- a.txt (Size: 3 bytes, Modified: 2024-03-05T08:15:30Z)"

    def test_other_offsets_keep_hours_and_minutes(self):
        tz = timezone(timedelta(hours=-5, minutes=-30))
        item = ListedItem(name="a.txt", size=3, modified=datetime(2024, 3, 5, 8, 15, 30, tzinfo=tz))

        assert item.line().endswith("Modified: 2024-03-05T08:15:30-05:30)")
