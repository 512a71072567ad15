"""Tests for normalisation of the flexible expose call shapes."""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from pathlib import Path

import pytest

from pkgexpose.options import SelectionOptions, normalise_options


class TestNormaliseOptions:
    """Test the normalise_options function."""

    def test_no_arguments_exposes_everything(self):
        assert normalise_options() == SelectionOptions(include=(), dir=None)

    @pytest.mark.parametrize(
        "options,names",
        [
            ("a", ("b",)),
            (["a", "b"], ()),
            (("a", "b"), ()),
            ({"include": ["a", "b"]}, ()),
            (None, ("a", "b")),
        ],
    )
    def test_equivalent_call_shapes(self, options, names):
        """Every supported shape yields the same include sequence."""
        assert normalise_options(options, *names).include == ("a", "b")

    def test_single_string(self):
        assert normalise_options("version").include == ("version",)

    def test_mapping_with_dir(self):
        options = normalise_options({"include": ["version"], "dir": "/some/path"})
        assert options.include == ("version",)
        assert options.dir == "/some/path"

    def test_mapping_dir_accepts_path_objects(self):
        options = normalise_options({"dir": Path("/some/path")})
        assert options.include == ()
        assert options.dir == os.fspath(Path("/some/path"))

    def test_mapping_with_empty_dir_falls_back_to_caller(self):
        assert normalise_options({"include": [], "dir": ""}).dir is None

    def test_trailing_names_are_appended_in_order(self):
        options = normalise_options(["name"], "version", "author")
        assert options.include == ("name", "version", "author")

    def test_trailing_names_extend_mapping_include(self):
        options = normalise_options({"include": ["name"], "dir": "/p"}, "version")
        assert options.include == ("name", "version")
        assert options.dir == "/p"

    def test_non_string_trailing_arguments_are_dropped(self):
        options = normalise_options("name", 42, None, "version", {"x": 1})
        assert options.include == ("name", "version")

    def test_unrecognised_shape_defaults_to_empty(self):
        assert normalise_options(42).include == ()
        assert normalise_options(42, "version").include == ("version",)

    def test_duplicates_are_kept(self):
        assert normalise_options(["a", "a"], "a").include == ("a", "a", "a")

    def test_selection_options_pass_through(self):
        given = SelectionOptions(include=("a",), dir="/x")
        assert normalise_options(given) == given
        assert normalise_options(given, "b") == SelectionOptions(include=("a", "b"), dir="/x")

    def test_selection_options_with_list_include(self):
        """A list include on a ready SelectionOptions becomes a tuple."""
        given = SelectionOptions(include=["a"], dir="/x")

        assert normalise_options(given) == SelectionOptions(include=("a",), dir="/x")
        assert normalise_options(given, "b").include == ("a", "b")

    def test_result_is_immutable(self):
        options = normalise_options(["a"])
        with pytest.raises(AttributeError):
            options.include = ("b",)
