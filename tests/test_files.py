"""
Tests for IGC file discovery.
"""

import os
import pytest
from igc_flightlog.io.files import (
    is_igc_file, list_igc_files, get_igc_files_from_path, default_kml_path
)


class TestFiles:
    """Test cases for file discovery helpers."""

    @pytest.fixture
    def flight_dir(self, tmp_path):
        """A directory with IGC files of mixed case and other files."""
        for name in ["b.igc", "A.IGC", "c.Igc", "notes.txt", "track.kml", "igc"]:
            (tmp_path / name).write_text("")
        (tmp_path / "folder.igc").mkdir()
        return tmp_path

    @pytest.mark.parametrize("name,expected", [
        ("flight.igc", True),
        ("FLIGHT.IGC", True),
        ("flight.IgC", True),
        ("flight.igc.bak", False),
        ("flight.txt", False),
        ("igc", False),
    ])
    def test_is_igc_file(self, name, expected):
        """Test the case-insensitive extension check."""
        assert is_igc_file(name) is expected

    def test_list_igc_files(self, flight_dir):
        """Test that only IGC files are listed, sorted by name."""
        files = list_igc_files(str(flight_dir))

        assert [os.path.basename(path) for path in files] == ["A.IGC", "b.igc", "c.Igc"]
        assert all(os.path.dirname(path) == str(flight_dir) for path in files)

    def test_list_missing_directory(self, tmp_path):
        """Test that an unreadable directory yields no files."""
        assert list_igc_files(str(tmp_path / "missing")) == []

    def test_path_is_directory(self, flight_dir):
        """Test resolving a directory."""
        assert len(get_igc_files_from_path(str(flight_dir))) == 3

    def test_path_is_single_file(self, flight_dir):
        """Test resolving a single IGC file."""
        path = str(flight_dir / "b.igc")

        assert get_igc_files_from_path(path) == [path]

    def test_path_is_not_an_igc_file(self, flight_dir):
        """Test that other files and missing paths yield nothing."""
        assert get_igc_files_from_path(str(flight_dir / "notes.txt")) == []
        assert get_igc_files_from_path(str(flight_dir / "missing.igc")) == []

    def test_default_kml_path(self, flight_dir):
        """Test that the KML file sits next to the first IGC file."""
        files = list_igc_files(str(flight_dir))

        assert default_kml_path(files) == os.path.abspath(files[0]) + ".kml"
        assert default_kml_path(files).endswith("A.IGC.kml")
