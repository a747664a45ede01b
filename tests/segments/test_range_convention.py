# test_range_convention.py
import pytest

from segments.range_convention import (
    RangeConvention,
    HalfOpenConvention,
    InclusiveConvention,
    RangeConventionFactory,
)


class TestConventions:

    def test_half_open_boundary_is_to(self):
        assert HalfOpenConvention().end_boundary(1, 5) == 5

    def test_inclusive_boundary_is_to_plus_one(self):
        assert InclusiveConvention().end_boundary(1, 5) == 6

    def test_half_open_degenerate_range_is_empty(self):
        assert HalfOpenConvention().is_empty(3, 3)

    def test_inclusive_degenerate_range_covers_one_position(self):
        assert not InclusiveConvention().is_empty(3, 3)

    def test_repr(self):
        assert repr(InclusiveConvention()) == "InclusiveConvention()"


class TestRangeConventionFactory:

    @pytest.mark.parametrize('name,expected', [
        ('exclusive', HalfOpenConvention),
        ('half-open', HalfOpenConvention),
        ('inclusive', InclusiveConvention),
        ('closed', InclusiveConvention),
        ('  Inclusive ', InclusiveConvention),
        ('EXCLUSIVE', HalfOpenConvention),
    ])
    def test_create_from_name(self, name, expected):
        assert isinstance(RangeConventionFactory.create(name), expected)

    def test_existing_instance_passes_through(self):
        existing = InclusiveConvention()
        assert RangeConventionFactory.create(existing) is existing

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="non riconosciuta"):
            RangeConventionFactory.create('open')

    def test_non_string_raises(self):
        with pytest.raises(ValueError, match="deve essere str"):
            RangeConventionFactory.create(42)

    def test_supported_types(self):
        types = RangeConventionFactory.get_supported_types()
        assert 'exclusive' in types
        assert 'inclusive' in types

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            RangeConvention()
