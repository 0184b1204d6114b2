"""Request schemas — email field normalization and body shape validation."""

import pytest
from pydantic import ValidationError

from friendgraph.schemas.friendship import FriendPairRequest
from friendgraph.schemas.recipients import RecipientsRequest
from friendgraph.schemas.subscription import RequestorTargetRequest


def test_emails_are_stripped_but_case_preserved():
    req = RequestorTargetRequest(requestor=" Jane@Example.com ", target="john@example.com")
    assert req.requestor == "Jane@Example.com"


@pytest.mark.parametrize("bad", ["", "   ", "no-at-sign", "two words@x.com", "a@b@"])
def test_malformed_emails_rejected(bad):
    with pytest.raises(ValidationError):
        RequestorTargetRequest(requestor=bad, target="john@example.com")


@pytest.mark.parametrize("count", [0, 1, 3])
def test_friend_pair_requires_exactly_two(count):
    emails = [f"user{i}@example.com" for i in range(count)]
    with pytest.raises(ValidationError):
        FriendPairRequest(friends=emails)


def test_recipients_text_defaults_to_empty():
    assert RecipientsRequest(sender="john@example.com").text == ""


def test_recipients_text_length_bounded():
    with pytest.raises(ValidationError):
        RecipientsRequest(sender="john@example.com", text="x" * 10_001)
