"""
Property-based tests for ErrorCollection ordering and de-duplication.
"""

from hypothesis import given
from hypothesis import strategies as st
from simpler_command.domain.errors import ErrorCollection

fields = st.sampled_from(["base", "foo", "bar", "foo_bar", "baz"])
messages = st.sampled_from(["is broken", "is slow", "is missing", "won't work"])
pairs = st.lists(st.tuples(fields, messages), max_size=30)


def _first_occurrences(items):
    seen = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


@given(pairs)
def test_each_field_keeps_distinct_messages_in_first_occurrence_order(items):
    errors = ErrorCollection()
    for field, message in items:
        errors.add(field, message)

    for field in {field for field, _ in items}:
        expected = _first_occurrences([m for f, m in items if f == field])
        assert errors[field] == expected


@given(pairs)
def test_fields_iterate_in_first_insertion_order(items):
    errors = ErrorCollection()
    for field, message in items:
        errors.add(field, message)

    iterated_fields = _first_occurrences([field for field, _ in errors])
    assert iterated_fields == _first_occurrences([field for field, _ in items])


@given(pairs, pairs)
def test_add_all_matches_replaying_add(existing, incoming):
    merged = ErrorCollection()
    replayed = ErrorCollection()
    source = ErrorCollection()
    for field, message in existing:
        merged.add(field, message)
        replayed.add(field, message)
    for field, message in incoming:
        source.add(field, message)

    merged.add_all(source)
    for field, message in source:
        replayed.add(field, message)

    assert list(merged) == list(replayed)


@given(pairs)
def test_emptiness_tracks_whether_anything_was_added(items):
    errors = ErrorCollection()
    for field, message in items:
        errors.add(field, message)

    assert errors.is_empty() == (not items)
    assert len(errors.full_messages()) == len(errors)
