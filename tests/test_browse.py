"""Tests for request coercion and query dispatch precedence."""

from typing import List, Tuple

import pytest

from vidcat.models.page import PaginatedVideos
from vidcat.models.query import BrowseRequest
from vidcat.services.browse import dispatch_browse


class RecordingEngine:
    """Stand-in engine that records which listing operation was invoked."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str, int]] = []

    def _result(self, page: int) -> PaginatedVideos:
        return PaginatedVideos(videos=[], page=page, total_pages=0, total_videos=0, has_next=False, has_previous=False)

    def paginate(self, page: int) -> PaginatedVideos:
        self.calls.append(("paginate", "", page))
        return self._result(page)

    def search(self, query: str, page: int = 1) -> PaginatedVideos:
        self.calls.append(("search", query, page))
        return self._result(page)

    def filter_by_category(self, name: str, page: int = 1) -> PaginatedVideos:
        self.calls.append(("category", name, page))
        return self._result(page)

    def filter_by_performer(self, name: str, page: int = 1) -> PaginatedVideos:
        self.calls.append(("performer", name, page))
        return self._result(page)

    def filter_by_tag(self, name: str, page: int = 1) -> PaginatedVideos:
        self.calls.append(("tag", name, page))
        return self._result(page)


class TestBrowseRequest:
    """Tests for BrowseRequest coercion."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (None, 1), ("", 1), ("abc", 1), ("0", 1), ("-3", 1), (-3, 1),
            ("4", 4), (" 2 ", 2), (7, 7), ("2abc", 2), ("2.5", 2),
        ],
    )
    def test_page_defaults_to_one(self, raw, expected):
        assert BrowseRequest(page=raw).page == expected

    def test_page_omitted(self):
        assert BrowseRequest().page == 1

    def test_text_is_trimmed_and_blank_is_absent(self):
        request = BrowseRequest(search="  drone ", category="   ", tag="")

        assert request.search == "drone"
        assert request.category is None
        assert request.tag is None
        assert request.performer is None


class TestDispatchBrowse:
    """Precedence: search, category, performer, tag, then plain pagination."""

    @pytest.mark.parametrize(
        "params,expected",
        [
            ({"search": "q", "category": "c", "performer": "p", "tag": "t"}, ("search", "q", 2)),
            ({"category": "c", "performer": "p", "tag": "t"}, ("category", "c", 2)),
            ({"performer": "p", "tag": "t"}, ("performer", "p", 2)),
            ({"tag": "t"}, ("tag", "t", 2)),
            ({}, ("paginate", "", 2)),
            ({"search": "  ", "tag": "t"}, ("tag", "t", 2)),
        ],
    )
    def test_precedence(self, params, expected):
        engine = RecordingEngine()

        result = dispatch_browse(engine, BrowseRequest(page=2, **params))

        assert engine.calls == [expected]
        assert result.page == 2
