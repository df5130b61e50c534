"""Tests for hospitalfinder.nodes.search_dispatcher_node."""

import pytest

from hospitalfinder.constants import SearchMode
from hospitalfinder.nodes import detect_search_mode
from hospitalfinder.tools.location_tools import Coordinates

HERE = Coordinates(28.6, 77.2)


class TestDetectSearchMode:
    @pytest.mark.parametrize("location", [None, HERE])
    def test_text_wins_over_location(self, location):
        assert detect_search_mode("Saket", location) == SearchMode.TEXT

    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_blank_query_with_location(self, query):
        assert detect_search_mode(query, HERE) == SearchMode.NEARBY

    @pytest.mark.parametrize("query", ["", " \t", None])
    def test_blank_query_without_location(self, query):
        assert detect_search_mode(query, None) == SearchMode.NONE
