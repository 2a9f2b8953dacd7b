"""Tests for loading names and TLDs."""

import pytest

from dn_check.exceptions import InputError
from dn_check.utils.names import load_names, read_names_from_file, split_names, split_tlds


class TestNames:
    """Test cases for name and TLD input."""

    def test_split_names(self):
        assert split_names("Yahoo, sun4everyone,,") == ["yahoo", "sun4everyone", "", ""]

    def test_read_names_from_file(self, tmp_path):
        path = tmp_path / "names.txt"
        path.write_text("yahoo\n  Google  \n\nsun4everyone\n")
        assert read_names_from_file(str(path)) == ["yahoo", "google", "", "sun4everyone"]

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(InputError):
            read_names_from_file(str(tmp_path / "missing.txt"))

    def test_inline_names_take_precedence(self, tmp_path):
        path = tmp_path / "names.txt"
        path.write_text("fromfile\n")
        assert load_names(names="inline", file=str(path)) == ["inline"]
        assert load_names(file=str(path)) == ["fromfile"]

    def test_no_names(self):
        with pytest.raises(InputError, match="No names provided"):
            load_names()

    def test_split_tlds(self):
        assert split_tlds("com, .NET,,org") == ["com", "net", "org"]

    def test_split_tlds_empty(self):
        with pytest.raises(InputError):
            split_tlds(" , ")
