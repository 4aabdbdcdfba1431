"""
Unit tests for PagedList.
"""

import pytest

from appointment_manager.core.application import PagedList


@pytest.mark.unit
class TestPagedList:
    def test_middle_page(self):
        paged = PagedList.create(items=list(range(10)), page=2, page_size=10, total_count=25)

        assert paged.has_next_page is True
        assert paged.has_previous_page is True

    def test_single_page(self):
        paged = PagedList.create(items=list(range(5)), page=1, page_size=10, total_count=5)

        assert paged.has_next_page is False
        assert paged.has_previous_page is False

    def test_last_exact_page(self):
        paged = PagedList.create(items=list(range(10)), page=2, page_size=10, total_count=20)

        assert paged.has_next_page is False
        assert paged.has_previous_page is True

    def test_empty(self):
        paged = PagedList.create(items=[], page=1, page_size=10, total_count=0)

        assert paged.items == ()
        assert not paged.has_next_page

    def test_to_dict(self):
        paged = PagedList.create(items=["a"], page=1, page_size=1, total_count=2)

        assert paged.to_dict() == {
            "items": ["a"],
            "page": 1,
            "page_size": 1,
            "total_count": 2,
            "has_next_page": True,
            "has_previous_page": False,
        }
