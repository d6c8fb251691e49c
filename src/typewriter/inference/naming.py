"""Type-name derivation for keypaths.

A keypath such as ``author.books[]`` becomes ``AuthorBooksItem``: every
``[]`` segment is spelled ``Item``, the remaining separators are dropped and
each word is joined in camel case with a leading capital.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from typewriter.core.protocols import TypeNameGenerator

ARRAY_ITEM_WORD = "Item"
DEFAULT_ROOT_TYPE_NAME = "Root"

_RE_WORD_SEPARATOR = re.compile(r"[\W_]+")


def camel_case(text: str) -> str:
    words = [word for word in _RE_WORD_SEPARATOR.split(text) if word]
    if not words:
        return ""

    head = words[0][:1].lower() + words[0][1:]
    tail = "".join(word[:1].upper() + word[1:] for word in words[1:])
    name = head + tail
    if name[0].isdigit():
        name = "_" + name
    return name


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def default_type_name_generator(keypath: str) -> str | None:
    name = camel_case(keypath.replace("[]", f" {ARRAY_ITEM_WORD} "))
    if not name:
        return None
    return capitalize_first(name)


def resolve_type_name(
    keypath: str,
    named_keypaths: Mapping[str, str],
    type_name_generator: TypeNameGenerator | None,
    root_type_name: str | None,
) -> str | None:
    """Pick the type name for a keypath, or None when it stays anonymous.

    Overrides win over the generator; the root always gets a name.
    """
    name = named_keypaths.get(keypath)
    if not name and type_name_generator is not None:
        name = type_name_generator(keypath)
    if keypath == "":
        return name or root_type_name or DEFAULT_ROOT_TYPE_NAME
    return name or None


def child_keypath(parent: str, member: str) -> str:
    return f"{parent}.{member}" if parent else member
