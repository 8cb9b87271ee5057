"""
Tests pour les objets valeur de pagination et de filtrage.
"""

import pytest

from catalog.core.value_objects import (
    ALL_CATEGORIES,
    Page,
    PageRequest,
    ProductFilter,
    SortDirection,
)


class TestPageRequest:
    """Tests pour PageRequest."""

    def test_defaults(self):
        request = PageRequest()

        assert (request.page, request.size, request.sort) == (0, 12, None)
        assert request.direction is SortDirection.ASC
        assert request.offset == 0

    def test_offset(self):
        assert PageRequest(page=3, size=12).offset == 36

    @pytest.mark.parametrize("page,size", [(-1, 12), (0, 0)])
    def test_invalid_values_rejected(self, page, size):
        with pytest.raises(ValueError):
            PageRequest(page=page, size=size)

    def test_parse_sort_with_direction(self):
        request = PageRequest.parse(page=1, size=5, sort="price,DESC")

        assert request.sort == "price"
        assert request.direction is SortDirection.DESC

    def test_parse_sort_without_direction(self):
        request = PageRequest.parse(sort="name")

        assert request.sort == "name"
        assert request.direction is SortDirection.ASC

    def test_parse_invalid_direction(self):
        with pytest.raises(ValueError):
            PageRequest.parse(sort="name,sideways")


class TestPage:
    """Tests pour Page."""

    def test_total_pages(self):
        assert Page(size=12, total=25).total_pages == 3
        assert Page(size=12, total=24).total_pages == 2
        assert Page(size=12, total=0).total_pages == 0

    def test_first_and_last(self):
        assert Page(page=0, size=10, total=25).is_first
        assert not Page(page=1, size=10, total=25).is_last
        assert Page(page=2, size=10, total=25).is_last
        assert Page(page=0, size=10, total=0).is_last

    def test_map_preserves_order_and_metadata(self):
        page = Page(items=(3, 1, 2), page=1, size=3, total=9)

        mapped = page.map(str)

        assert mapped.items == ("3", "1", "2")
        assert (mapped.page, mapped.size, mapped.total) == (1, 3, 9)


class TestProductFilter:
    """Tests pour ProductFilter."""

    def test_all_categories_sentinel_normalized(self):
        criteria = ProductFilter.of(ALL_CATEGORIES, None)

        assert criteria.category_id is None
        assert not criteria.has_category
        assert criteria.name == ""

    def test_real_category_kept(self):
        criteria = ProductFilter.of(2, " pho ")

        assert criteria.has_category
        assert criteria.name == "pho"
