"""Hypothesis strategies for intlextract tests."""

from tests.strategies.icu import (
    argument_names,
    descriptions,
    literal_texts,
    plain_texts,
    simple_messages,
)

__all__ = [
    "argument_names",
    "descriptions",
    "literal_texts",
    "plain_texts",
    "simple_messages",
]
