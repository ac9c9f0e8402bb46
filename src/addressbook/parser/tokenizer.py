"""Splits command arguments on field prefixes such as ``n/`` and ``t/``."""

from __future__ import annotations

import re
from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

PREFIX_NAME = "n/"
PREFIX_PHONE = "p/"
PREFIX_EMAIL = "e/"
PREFIX_ADDRESS = "a/"
PREFIX_TAG = "t/"
PREFIX_REMARK = "r/"

ALL_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_TAG,
    PREFIX_REMARK,
)


@dataclass(frozen=True, slots=True)
class ArgumentMultimap:
    """Values captured for each prefix, in order of appearance."""

    preamble: str = ""
    values: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def has(self, prefix: str) -> bool:
        return prefix in self.values

    def value(self, prefix: str) -> str | None:
        """Return the last value given for ``prefix``, if any."""

        captured = self.values.get(prefix)
        if not captured:
            return None
        return captured[-1]

    def all_values(self, prefix: str) -> tuple[str, ...]:
        return self.values.get(prefix, ())


def tokenize(arguments: str, prefixes: Iterable[str] = ALL_PREFIXES) -> ArgumentMultimap:
    """Split ``arguments`` into a preamble and per-prefix values.

    A prefix only counts when it follows whitespace, so ``a/b`` inside an
    address value is not mistaken for a new field.
    """

    text = " " + arguments
    positions: list[tuple[int, str]] = []
    for prefix in prefixes:
        pattern = re.compile(r"(?<=\s)" + re.escape(prefix))
        positions.extend((match.start(), prefix) for match in pattern.finditer(text))
    positions.sort()

    if not positions:
        return ArgumentMultimap(preamble=text.strip())

    captured: dict[str, list[str]] = defaultdict(list)
    for offset, (start, prefix) in enumerate(positions):
        end = positions[offset + 1][0] if offset + 1 < len(positions) else len(text)
        captured[prefix].append(text[start + len(prefix) : end].strip())

    return ArgumentMultimap(
        preamble=text[: positions[0][0]].strip(),
        values={prefix: tuple(values) for prefix, values in captured.items()},
    )


__all__ = [
    "ALL_PREFIXES",
    "PREFIX_ADDRESS",
    "PREFIX_EMAIL",
    "PREFIX_NAME",
    "PREFIX_PHONE",
    "PREFIX_REMARK",
    "PREFIX_TAG",
    "ArgumentMultimap",
    "tokenize",
]
