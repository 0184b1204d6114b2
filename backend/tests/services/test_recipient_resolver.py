"""Recipient Resolver — union of friends, subscribers and mentions minus blockers.

Invariants:
    - A candidate present in several sources appears exactly once
    - A candidate who blocked the sender never appears, whatever the source
    - Only the candidate's block counts (sender blocking a candidate does not)
    - Unresolved mention tokens are dropped silently; unknown sender is an error
    - Any store failure aborts the resolution
"""

import pytest

from friendgraph.core.errors import StoreError, UserNotFoundError
from friendgraph.services.recipient_resolver import RecipientResolver


async def test_friends_and_mentions_example(store):
    store.befriend("john@example.com", "jane@example.com")

    recipients = await RecipientResolver(store).resolve(
        "john@example.com", "hi there bob@example.com",
    )

    assert recipients == {"jane@example.com", "bob@example.com"}


async def test_no_relations_and_no_mentions_is_empty(store):
    assert await RecipientResolver(store).resolve("carol@example.com", "hello") == set()


async def test_empty_text_still_includes_friends_and_subscribers(store):
    store.befriend("john@example.com", "jane@example.com")
    store.add_subscription("alice@example.com", "john@example.com")

    recipients = await RecipientResolver(store).resolve("john@example.com", "")

    assert recipients == {"jane@example.com", "alice@example.com"}


async def test_text_without_at_contributes_nothing(store):
    recipients = await RecipientResolver(store).resolve(
        "john@example.com", "bob example com",
    )

    assert recipients == set()
    assert "get_users_by_emails" in store.calls


async def test_subscribers_are_included(store):
    store.add_subscription("carol@example.com", "john@example.com")
    store.add_subscription("john@example.com", "bob@example.com")

    recipients = await RecipientResolver(store).resolve("john@example.com", "")

    assert recipients == {"carol@example.com"}


async def test_friend_who_is_also_subscriber_appears_once(store):
    store.befriend("john@example.com", "jane@example.com")
    store.add_subscription("jane@example.com", "john@example.com")

    recipients = await RecipientResolver(store).resolve(
        "john@example.com", "hey jane@example.com",
    )

    assert recipients == {"jane@example.com"}
    assert store.calls.count("is_blocked") == 1


@pytest.mark.parametrize("source", ["friend", "subscriber", "mention"])
async def test_blocker_is_suppressed_from_every_source(store, source):
    if source == "friend":
        store.befriend("john@example.com", "jane@example.com")
        text = ""
    elif source == "subscriber":
        store.add_subscription("jane@example.com", "john@example.com")
        text = ""
    else:
        text = "cc jane@example.com"
    store.add_block("jane@example.com", "john@example.com")

    recipients = await RecipientResolver(store).resolve("john@example.com", text)

    assert "jane@example.com" not in recipients


async def test_sender_blocking_candidate_does_not_suppress(store):
    store.befriend("john@example.com", "jane@example.com")
    store.add_block("john@example.com", "jane@example.com")

    recipients = await RecipientResolver(store).resolve("john@example.com", "")

    assert recipients == {"jane@example.com"}


async def test_unresolved_mentions_are_dropped(store):
    recipients = await RecipientResolver(store).resolve(
        "john@example.com", "hello ghost@example.com and bob@example.com",
    )

    assert recipients == {"bob@example.com"}


async def test_trailing_punctuation_mention_does_not_resolve(store):
    recipients = await RecipientResolver(store).resolve(
        "john@example.com", "ping bob@example.com, thanks",
    )

    assert recipients == set()


async def test_self_mention_is_a_candidate(store):
    recipients = await RecipientResolver(store).resolve(
        "john@example.com", "note to self john@example.com",
    )

    assert recipients == {"john@example.com"}


async def test_self_mention_suppressed_by_self_block(store):
    store.add_block("john@example.com", "john@example.com")

    recipients = await RecipientResolver(store).resolve(
        "john@example.com", "john@example.com",
    )

    assert recipients == set()


async def test_unknown_sender_raises(store):
    with pytest.raises(UserNotFoundError):
        await RecipientResolver(store).resolve("ghost@example.com", "hi")


@pytest.mark.parametrize(
    "operation",
    ["list_friends", "list_subscribers", "get_users_by_emails", "is_blocked"],
)
async def test_any_store_failure_aborts(store, operation):
    store.befriend("john@example.com", "jane@example.com")
    store.fail_on = operation

    with pytest.raises(StoreError) as exc_info:
        await RecipientResolver(store).resolve("john@example.com", "bob@example.com")

    assert exc_info.value.operation == operation
