"""BDD step definitions for bounded serialization features."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from tierlog.adapters.storage.ring_buffer import PriorityBufferStore
from tierlog.core.aggregate import LogAggregate
from tierlog.core.encoding.json_document import decode_log, encode_log, encoded_size
from tierlog.core.models import LogEntry, Priority, Sort


@dataclass
class SerializationContext:
    """State shared between the steps of one scenario."""

    store: PriorityBufferStore
    aggregate: LogAggregate = field(default_factory=LogAggregate)
    budget: int = 0
    payload: str = ""

    @property
    def kept(self) -> list[LogEntry]:
        return decode_log(self.payload)


@pytest.fixture
def ctx(store: PriorityBufferStore) -> SerializationContext:
    """Fresh scenario context for each test."""
    return SerializationContext(store=store)


@given(
    parsers.parse("{count:d} {tier} entries with {size:d}-character messages")
)
def given_entries(ctx: SerializationContext, count: int, tier: str, size: int) -> None:
    priority = Priority.parse(tier)
    for i in range(count):
        ctx.store.append(priority, str(i).rjust(size, "x"), file="job.py", line=i)


@when(parsers.parse("all tiers are serialized with a budget of {budget:d} bytes"))
def when_serialized(ctx: SerializationContext, budget: int) -> None:
    ctx.aggregate.push_all(ctx.store)
    ctx.budget = budget
    ctx.payload = ctx.aggregate.serialize(budget)


@when(
    parsers.parse(
        'all tiers are sorted "{order}" and serialized '
        "with a budget of {budget:d} bytes"
    )
)
def when_sorted_and_serialized(
    ctx: SerializationContext, order: str, budget: int
) -> None:
    ctx.aggregate.push_all(ctx.store)
    ctx.aggregate.sort(Sort.parse(order))
    ctx.budget = budget
    ctx.payload = ctx.aggregate.serialize(budget)


@then(parsers.parse("the payload is at most {budget:d} bytes"))
def then_payload_within(ctx: SerializationContext, budget: int) -> None:
    assert encoded_size(ctx.payload) <= budget


@then("the payload holds the largest prefix that fits")
def then_largest_prefix(ctx: SerializationContext) -> None:
    entries = ctx.aggregate.entries
    kept = ctx.kept
    assert 0 < len(kept) < len(entries)
    assert kept == entries[: len(kept)]
    assert encoded_size(encode_log(entries[: len(kept) + 1])) > ctx.budget


@then("the payload holds every entry")
def then_every_entry(ctx: SerializationContext) -> None:
    assert ctx.payload == encode_log(ctx.aggregate.entries)


@then("the payload is the empty document")
def then_empty_document(ctx: SerializationContext) -> None:
    assert ctx.payload == '{"entries":[]}'


@then("the first entry in the payload is the newest entry")
def then_newest_first(ctx: SerializationContext) -> None:
    newest = max(ctx.aggregate.entries, key=lambda e: e.timestamp)
    assert ctx.kept[0] == newest
