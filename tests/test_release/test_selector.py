"""
Tests for auto-selection of release candidates.
"""
from core.release.selector import is_released, iter_tool_parts, select_recent


RELEASED_OUTPUT = "[Context released: bash]\n- Title: old\n- Size: 10 bytes (0.01 KB)"


class TestSelectRecent:
    """Tests for select_recent."""

    def test_takes_most_recent(self, conversation, tool_part):
        """Test five candidates with count 3 selects the last three."""
        messages = conversation(*[[tool_part(f"call_{i}")] for i in range(1, 6)])

        selection = select_recent(messages, 3)

        assert selection.call_ids == ["call_3", "call_4", "call_5"]

    def test_count_exceeds_candidates(self, conversation, tool_part):
        """Test fewer candidates than count returns all of them without padding."""
        messages = conversation([tool_part("call_1")], [tool_part("call_2")])

        selection = select_recent(messages, 3)

        assert selection.call_ids == ["call_1", "call_2"]

    def test_non_positive_count_selects_nothing(self, conversation, tool_part):
        """Test zero and negative counts select nothing."""
        messages = conversation([tool_part("call_1")])

        assert select_recent(messages, 0).call_ids == []
        assert select_recent(messages, -2).call_ids == []

    def test_spans_multiple_parts_per_message(self, conversation, tool_part):
        """Test selection looks across messages and keeps part order within one."""
        messages = conversation(
            [tool_part("call_1")],
            [tool_part("call_2"), tool_part("call_3")],
        )

        selection = select_recent(messages, 2)

        assert selection.call_ids == ["call_2", "call_3"]

    def test_counts_skipped_parts(self, conversation, tool_part):
        """Test running and released parts are skipped and counted."""
        messages = conversation(
            [tool_part("call_1", status="running"), tool_part("call_2", status="pending")],
            [tool_part("call_3", output=RELEASED_OUTPUT)],
        )

        selection = select_recent(messages, 3)

        assert selection.call_ids == []
        assert selection.skipped_running == 2
        assert selection.skipped_released == 1

    def test_error_parts_count_as_running(self, conversation, tool_part):
        """Test errored tool calls are never candidates."""
        messages = conversation([tool_part("call_1", status="error")])

        selection = select_recent(messages, 3)

        assert selection.call_ids == []
        assert selection.skipped_running == 1

    def test_tools_filter(self, conversation, tool_part):
        """Test the allow-list limits candidates by tool name."""
        messages = conversation(
            [tool_part("call_1", tool="read")],
            [tool_part("call_2", tool="bash")],
            [tool_part("call_3", tool="grep")],
        )

        selection = select_recent(messages, 3, tools=["read", "grep"])

        assert selection.call_ids == ["call_1", "call_3"]

    def test_empty_tools_filter_allows_all(self, conversation, tool_part):
        """Test an empty allow-list does not filter."""
        messages = conversation([tool_part("call_1", tool="read")], [tool_part("call_2")])

        selection = select_recent(messages, 3, tools=[])

        assert selection.call_ids == ["call_1", "call_2"]

    def test_ignores_non_tool_parts(self, conversation, tool_part):
        """Test text parts are not considered."""
        text = {
            "id": "prt_text",
            "sessionID": "ses_test",
            "messageID": "",
            "type": "text",
            "text": "hello",
        }
        messages = conversation([text, tool_part("call_1")])

        assert [part.callID for _, part in iter_tool_parts(messages)] == ["call_1"]
        assert select_recent(messages, 3).call_ids == ["call_1"]


class TestIsReleased:
    """Tests for is_released."""

    def test_released_output(self, conversation, tool_part):
        messages = conversation([tool_part("call_1", output=RELEASED_OUTPUT)])
        _, part = next(iter_tool_parts(messages))

        assert is_released(part) is True

    def test_sentinel_must_be_prefix(self, conversation, tool_part):
        """Test the sentinel only counts at the start of the output."""
        messages = conversation([tool_part("call_1", output="log: " + RELEASED_OUTPUT)])
        _, part = next(iter_tool_parts(messages))

        assert is_released(part) is False

    def test_running_part_is_not_released(self, conversation, tool_part):
        messages = conversation([tool_part("call_1", status="running")])
        _, part = next(iter_tool_parts(messages))

        assert is_released(part) is False
