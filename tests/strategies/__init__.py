"""Hypothesis strategies for langbundle property tests.

Provides generators for language tags, message identifiers, template data
and nested catalog documents.
"""

from __future__ import annotations

import string

from hypothesis import strategies as st
from hypothesis.strategies import composite

from langbundle.constants import RESERVED_MESSAGE_KEYS

# Identifier segments never collide with reserved message-object keys, so a
# generated namespace is always read as a namespace.
_SEGMENT_ALPHABET = string.ascii_lowercase + string.digits + "_"


@composite
def id_segments(draw: st.DrawFn) -> str:
    """Generate one dot-free identifier segment that is not a reserved key."""
    first = draw(st.sampled_from(string.ascii_lowercase))
    rest = draw(st.text(alphabet=_SEGMENT_ALPHABET, max_size=8))
    segment = first + rest
    if segment in RESERVED_MESSAGE_KEYS:
        segment = f"{segment}_"
    return segment


@composite
def language_tags(draw: st.DrawFn) -> str:
    """Generate well-formed language tags in random casing and separator style."""
    language = draw(st.text(alphabet=string.ascii_letters, min_size=2, max_size=3))
    parts = [language]
    if draw(st.booleans()):
        parts.append(draw(st.sampled_from(["Hans", "hant", "LATN", "Cyrl"])))
    if draw(st.booleans()):
        parts.append(draw(st.sampled_from(["CN", "tw", "Us", "br", "419"])))
    separator = draw(st.sampled_from(["-", "_"]))
    return separator.join(parts)


message_texts = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",)),
    max_size=40,
)


@composite
def nested_documents(draw: st.DrawFn, max_depth: int = 3) -> dict[str, object]:
    """Generate a nested catalog document of namespaces and shorthand texts."""
    keys = draw(st.lists(id_segments(), min_size=1, max_size=4, unique=True))
    document: dict[str, object] = {}
    for key in keys:
        if max_depth > 0 and draw(st.booleans()):
            document[key] = draw(nested_documents(max_depth=max_depth - 1))
        else:
            document[key] = draw(message_texts)
    return document


@composite
def pair_sequences(draw: st.DrawFn) -> list[object]:
    """Generate flat key/value pair sequences, sometimes odd-length or with bad keys."""
    items: list[object] = []
    for _ in range(draw(st.integers(min_value=0, max_value=5))):
        key = draw(st.one_of(id_segments(), st.integers(), st.none()))
        items.extend([key, draw(st.one_of(st.text(max_size=5), st.integers()))])
    if draw(st.booleans()):
        items.append(draw(id_segments()))
    return items
