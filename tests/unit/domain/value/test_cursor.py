"""Unit tests for pagination cursors."""

import base64
from datetime import datetime, timedelta, timezone

import pytest

from forum.domain.error import InvalidArgumentError
from forum.domain.model.post import Post
from forum.domain.value import Author, Bump, PostId, UserId
from forum.domain.value.cursor import (
    EARLIEST,
    BumpTimeDescending,
    CreateTimeAscending,
    IndexAscending,
    SortField,
    decode_cursor,
    encode_cursor,
)

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def post_at(post_id: str, create_time: datetime, index: int = 0) -> Post:
    return Post(
        path=[PostId(post_id)],
        author=Author(id=UserId("alice")),
        index=index,
        bump=Bump(time=create_time),
        create_time=create_time,
        edit_time=create_time,
    )


class TestCreateTimeAscending:
    """Tests for the oldest-first cursor."""

    def test_fresh_cursor_starts_at_earliest_time(self):
        cursor = CreateTimeAscending()

        assert cursor.start_value() == EARLIEST
        assert cursor.sort_field == SortField.CREATE_TIME
        assert not cursor.descending
        assert cursor.follows(post_at("a", T0))

    def test_advance_resumes_strictly_after_last_item(self):
        """Posts at or before the last item are excluded from the next page."""
        last = post_at("m", T0)
        cursor = CreateTimeAscending().advance(last)

        assert cursor.after == T0
        assert cursor.after_id == "m"
        assert not cursor.follows(last)
        assert not cursor.follows(post_at("x", T0 - timedelta(seconds=1)))
        assert cursor.follows(post_at("b", T0 + timedelta(seconds=1)))

    def test_equal_times_are_split_by_id(self):
        cursor = CreateTimeAscending().advance(post_at("m", T0))

        assert cursor.follows(post_at("n", T0))
        assert not cursor.follows(post_at("a", T0))

    def test_advance_leaves_original_cursor_untouched(self):
        cursor = CreateTimeAscending()
        cursor.advance(post_at("m", T0))

        assert cursor.after is None
        assert cursor.after_id is None


class TestBumpTimeDescending:
    """Tests for the most-recently-active-first cursor."""

    def test_first_page_is_unbounded(self):
        cursor = BumpTimeDescending()

        assert cursor.start_value() is None
        assert cursor.descending
        assert cursor.follows(post_at("a", datetime.now(timezone.utc) + timedelta(days=1)))

    def test_advance_moves_backwards_in_time(self):
        cursor = BumpTimeDescending().advance(post_at("m", T0))

        assert cursor.follows(post_at("b", T0 - timedelta(minutes=1)))
        assert not cursor.follows(post_at("c", T0 + timedelta(minutes=1)))
        # Same bump time: ids continue downwards
        assert cursor.follows(post_at("a", T0))
        assert not cursor.follows(post_at("z", T0))

    def test_unbumped_post_sorts_as_now(self):
        post = Post(path=[PostId("a")], author=Author(id=UserId("alice")))

        value = BumpTimeDescending().sort_value(post)

        assert value >= T0
        assert abs(datetime.now(timezone.utc) - value) < timedelta(minutes=1)


class TestIndexAscending:
    """Tests for the manual-order cursor."""

    def test_orders_by_index_then_id(self):
        cursor = IndexAscending()
        posts = [post_at("b", T0, index=2), post_at("c", T0, index=1), post_at("a", T0, index=1)]

        ordered = sorted(posts, key=cursor.sort_key)

        assert [p.id for p in ordered] == ["a", "c", "b"]

    def test_advance_past_equal_indexes(self):
        cursor = IndexAscending().advance(post_at("a", T0, index=1))

        assert cursor.after == 1
        assert cursor.follows(post_at("c", T0, index=1))
        assert cursor.follows(post_at("b", T0, index=2))
        assert not cursor.follows(post_at("0", T0, index=0))


class TestCursorTokens:
    """Tests for opaque cursor tokens."""

    def test_token_restores_same_ordering_and_position(self):
        cursor = BumpTimeDescending().advance(post_at("m", T0))

        restored = decode_cursor(encode_cursor(cursor))

        assert isinstance(restored, BumpTimeDescending)
        assert restored == cursor

    def test_token_is_url_safe(self):
        token = encode_cursor(IndexAscending(after=3, after_id=PostId("a+b-c")))

        assert "/" not in token
        assert "+" not in token

    @pytest.mark.parametrize("token", ["not a cursor", "e30=", "!!!", "é"])
    def test_garbage_token_is_invalid_argument(self, token):
        with pytest.raises(InvalidArgumentError):
            decode_cursor(token)

    def test_unknown_ordering_is_invalid_argument(self):
        token = base64.urlsafe_b64encode(b'{"kind": "random", "after": 1}').decode()

        with pytest.raises(InvalidArgumentError):
            decode_cursor(token)

    @pytest.mark.parametrize(
        "payload",
        [
            b'{"kind": "create_time_asc", "after": "2020-01-01T00:00:00"}',
            b'{"kind": "bump_time_desc", "after": "2020-01-01T00:00:00"}',
        ],
    )
    def test_time_without_timezone_is_invalid_argument(self, payload):
        """Naive times could not be compared with stored times."""
        token = base64.urlsafe_b64encode(payload).decode()

        with pytest.raises(InvalidArgumentError):
            decode_cursor(token)

    def test_index_beyond_storage_range_is_invalid_argument(self):
        token = base64.urlsafe_b64encode(
            b'{"kind": "index_asc", "after": 4294967296}'
        ).decode()

        with pytest.raises(InvalidArgumentError):
            decode_cursor(token)
