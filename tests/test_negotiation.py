"""Tests for response mode selection."""

import pytest

from fparty.core.negotiation import ResponseMode, select_response_mode


class TestSelectResponseMode:
    """Tests for select_response_mode()."""

    @pytest.mark.parametrize("accept", [None, "", "*/*", "text/html", "application/json"])
    def test__no_script_preference__selects_full(self, accept: str | None) -> None:
        assert select_response_mode(accept) is ResponseMode.FULL

    @pytest.mark.parametrize(
        "accept",
        [
            "text/javascript",
            "application/javascript",
            "text/javascript, application/javascript, */*; q=0.01",
            "Text/JavaScript",
        ],
    )
    def test__script_preference__selects_script(self, accept: str) -> None:
        assert select_response_mode(accept) is ResponseMode.SCRIPT

    def test__html_and_script_equal_weight__prefers_full(self) -> None:
        assert select_response_mode("text/javascript, text/html") is ResponseMode.FULL

    def test__html_lower_weight__selects_script(self) -> None:
        accept = "text/html;q=0.5, text/javascript"

        assert select_response_mode(accept) is ResponseMode.SCRIPT

    def test__script_excluded_with_zero_weight__selects_full(self) -> None:
        assert select_response_mode("text/javascript;q=0") is ResponseMode.FULL

    def test__malformed_quality__treated_as_one(self) -> None:
        accept = "text/html;q=0.2, text/javascript;q=abc"

        assert select_response_mode(accept) is ResponseMode.SCRIPT
