"""Prefix tokenizer for command arguments.

Turns ``"1 n/John Doe t/friend t/work"`` into a preamble (``"1"``) and a
multimap from prefix to values. A prefix only counts when it starts the
argument string or follows whitespace, so ``nn/`` is never mistaken for
``n/``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from addrctl.errors import ParseError
from addrctl.logic import messages

PREFIX_NAME = "n/"
PREFIX_PHONE = "p/"
PREFIX_EMAIL = "e/"
PREFIX_ADDRESS = "a/"
PREFIX_BIRTHDAY = "b/"
PREFIX_RELATIONSHIP = "r/"
PREFIX_NICKNAME = "nn/"
PREFIX_NOTES = "no/"
PREFIX_TAG = "t/"
PREFIX_REMARK = "rm/"


@dataclass
class ArgumentMultimap:
    """Values captured per prefix, plus the text before the first prefix."""

    preamble: str = ""
    values: dict[str, list[str]] = field(default_factory=dict)

    def get_value(self, prefix: str) -> str | None:
        """Return the last value given for *prefix*, or None."""
        found = self.values.get(prefix)
        return found[-1] if found else None

    def get_all_values(self, prefix: str) -> list[str]:
        return list(self.values.get(prefix, []))

    def has(self, prefix: str) -> bool:
        return prefix in self.values

    def verify_no_duplicate_prefixes_for(self, *prefixes: str) -> None:
        """Raise ParseError if any single-valued *prefixes* appear more than once."""
        duplicated = [p for p in prefixes if len(self.values.get(p, [])) > 1]
        if duplicated:
            raise ParseError(messages.duplicate_prefixes(duplicated))


def tokenize(args: str, prefixes: Sequence[str]) -> ArgumentMultimap:
    """Split *args* on the given *prefixes*.

    Values are stripped of surrounding whitespace. Text before the first
    recognised prefix becomes the preamble.
    """
    if not prefixes:
        return ArgumentMultimap(preamble=args.strip())

    alternatives = "|".join(re.escape(p) for p in sorted(prefixes, key=len, reverse=True))
    pattern = re.compile(rf"(?<=\s)({alternatives})")
    text = " " + args

    matches = list(pattern.finditer(text))
    multimap = ArgumentMultimap(preamble=text[: matches[0].start()].strip() if matches else text.strip())
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        value = text[match.end() : end].strip()
        multimap.values.setdefault(match.group(1), []).append(value)
    return multimap
