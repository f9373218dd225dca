#
# Copyright (C) 2026 The chromaslide developers, LGPL-3.0-or-later
#

"""Unit tests for chromaslide.traits module."""

from __future__ import annotations

import pytest
from traitlets import HasTraits, Int, TraitError

from chromaslide.errors import ShapeError
from chromaslide.traits import FixedLengthTuple, WriteOnceAny, get_args_dict

# ─────────────────────────────────────────────────────────────────────────────
# Sample classes (not named Test* to avoid pytest collection)
# ─────────────────────────────────────────────────────────────────────────────


class SampleWindow(HasTraits):
    FIELDS = ("name", "bounds", "loose")

    name = WriteOnceAny()
    bounds = FixedLengthTuple(2, "Bounds")
    loose = FixedLengthTuple(2, "Loose", "Need two.", require_sequence=False)


class SampleUnordered(HasTraits):
    beta = Int(2)
    alpha = Int(1)


# ─────────────────────────────────────────────────────────────────────────────
# WriteOnceAny Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestWriteOnceAny:
    """Tests for WriteOnceAny."""

    def test_first_write(self):
        """The first value is stored as given."""
        obj = SampleWindow()
        value = ["x"]
        obj.name = value
        assert obj.name is value

    def test_second_write_rejected(self):
        """A second value raises TraitError and keeps the first."""
        obj = SampleWindow()
        obj.name = "first"
        with pytest.raises(TraitError):
            obj.name = "second"
        assert obj.name == "first"

    def test_none_write_is_final(self):
        """A trait set to None cannot be written again."""
        obj = SampleWindow()
        obj.name = None
        with pytest.raises(TraitError):
            obj.name = "later"
        assert obj.name is None

    def test_set_trait_after_none(self):
        """set_trait is refused once a None value was written."""
        obj = SampleWindow()
        obj.set_trait("name", None)
        with pytest.raises(TraitError):
            obj.set_trait("name", "later")
        assert obj.name is None

    def test_writes_tracked_per_instance(self):
        """Writing one instance does not lock another."""
        first = SampleWindow()
        second = SampleWindow()
        first.name = "first"
        second.name = "second"
        assert first.name == "first"
        assert second.name == "second"

    def test_write_once_flag(self):
        """The trait advertises that it is write-once."""
        assert SampleWindow.class_traits()["name"].write_once is True


# ─────────────────────────────────────────────────────────────────────────────
# FixedLengthTuple Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestFixedLengthTuple:
    """Tests for FixedLengthTuple."""

    def test_stores_tuple_copy(self):
        """Lists are copied into tuples."""
        obj = SampleWindow()
        values = [1, 2]
        obj.bounds = values
        assert obj.bounds == (1, 2)
        values.append(3)
        assert obj.bounds == (1, 2)

    def test_default_is_none(self):
        """An unset trait reads as None."""
        assert SampleWindow().bounds is None

    def test_default_count_message(self):
        """Without a custom message, the count is spelled out."""
        obj = SampleWindow()
        with pytest.raises(ShapeError, match="Bounds must contain exactly 2 values."):
            obj.bounds = [1, 2, 3]

    def test_sequence_message(self):
        """Non-sequences are rejected with the label in the message."""
        obj = SampleWindow()
        with pytest.raises(ShapeError, match="Bounds must be provided as a sequence.") as excinfo:
            obj.bounds = "xy"
        assert excinfo.value.field == "bounds"

    def test_shape_error_is_trait_error(self):
        """ShapeError can be caught as a TraitError."""
        obj = SampleWindow()
        with pytest.raises(TraitError):
            obj.bounds = [1]

    def test_without_sequence_check(self):
        """require_sequence=False only checks the element count."""
        obj = SampleWindow()
        obj.loose = "xy"
        assert obj.loose == ("x", "y")

    def test_without_sequence_check_unsized(self):
        """Unsized values fail the count check."""
        obj = SampleWindow()
        with pytest.raises(ShapeError, match="Need two."):
            obj.loose = 12

    def test_failed_write_does_not_lock(self):
        """A value rejected by validation leaves the trait writable."""
        obj = SampleWindow()
        with pytest.raises(ShapeError):
            obj.bounds = [1]
        obj.bounds = [1, 2]
        assert obj.bounds == (1, 2)

    def test_write_once(self):
        """A stored tuple cannot be replaced."""
        obj = SampleWindow()
        obj.bounds = [0, 1]
        with pytest.raises(TraitError):
            obj.bounds = [2, 3]
        assert obj.bounds == (0, 1)


# ─────────────────────────────────────────────────────────────────────────────
# get_args_dict Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestGetArgsDict:
    """Tests for get_args_dict."""

    def test_field_order(self):
        """Objects with FIELDS are listed in that order."""
        obj = SampleWindow()
        obj.loose = [3, 4]
        obj.bounds = [1, 2]
        obj.name = "w"
        assert list(get_args_dict(obj).keys()) == ["name", "bounds", "loose"]

    def test_none_values_kept(self):
        """Traits holding None are listed too."""
        obj = SampleWindow()
        obj.name = None
        obj.bounds = [1, 2]
        args = get_args_dict(obj)
        assert args["name"] is None
        assert args["bounds"] == (1, 2)

    def test_sorted_without_fields(self):
        """Objects without FIELDS are listed alphabetically."""
        obj = SampleUnordered()
        obj.alpha = 10
        obj.beta = 20
        assert get_args_dict(obj) == {"alpha": 10, "beta": 20}
        assert list(get_args_dict(obj).keys()) == ["alpha", "beta"]
