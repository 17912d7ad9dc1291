"""Casing detection and conversion for file, directory and identifier names.

Conversion is total and deterministic. A name is split into words on any
non-alphanumeric character, then on case humps::

    "MyComponent"    -> ["My", "Component"]
    "XMLHttpRequest" -> ["XML", "Http", "Request"]
    "v2Api"          -> ["v2", "Api"]
    "ABC1"           -> ["ABC1"]

Digits stay attached to the word before them, so an already compliant name
tokenizes back into the same words. A name is compliant with a casing when
converting it returns it unchanged.
"""

from typing import Callable

from .models.standards import Casing


def split_words(name: str) -> list[str]:
    """Split ``name`` into words; separators never yield empty words."""
    words: list[str] = []
    current: list[str] = []

    for index, char in enumerate(name):
        if not char.isalnum():
            if current:
                words.append("".join(current))
                current = []
            continue

        if current and char.isupper():
            previous = current[-1]
            following = name[index + 1] if index + 1 < len(name) else ""
            # lower/digit -> Upper starts a word; so does the last capital of
            # an acronym run when a lowercase letter follows ("XMLHttp").
            if not previous.isupper() or following.islower():
                words.append("".join(current))
                current = []

        current.append(char)

    if current:
        words.append("".join(current))
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_kebab(name: str) -> str:
    return "-".join(word.lower() for word in split_words(name))


def to_snake(name: str) -> str:
    return "_".join(word.lower() for word in split_words(name))


def to_screaming_snake(name: str) -> str:
    return "_".join(word.upper() for word in split_words(name))


def _settle(join: Callable[[list[str]], str], name: str) -> str:
    # Joining single-letter words can form a new acronym run ("a-b" -> "AB"),
    # so re-split until the result tokenizes back into itself.
    result = join(split_words(name))
    while True:
        again = join(split_words(result))
        if again == result:
            return result
        result = again


def _join_camel(words: list[str]) -> str:
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(word) for word in words[1:])


def _join_pascal(words: list[str]) -> str:
    return "".join(_capitalize(word) for word in words)


def to_camel(name: str) -> str:
    return _settle(_join_camel, name)


def to_pascal(name: str) -> str:
    return _settle(_join_pascal, name)


CONVERTERS: dict[str, Callable[[str], str]] = {
    "kebab": to_kebab,
    "snake": to_snake,
    "screaming-snake": to_screaming_snake,
    "camel": to_camel,
    "pascal": to_pascal,
}


def convert(name: str, casing: Casing) -> str:
    """Convert ``name`` to ``casing``.

    Names with no alphanumeric characters cannot be converted and are
    returned as they are.
    """
    converted = CONVERTERS[casing](name)
    return converted or name


def is_compliant(name: str, casing: Casing) -> bool:
    return convert(name, casing) == name


def split_name(name: str) -> tuple[str, str, str]:
    """Split a file name into ``(leading_dots, stem, extensions)``.

    Everything from the first dot after the stem is treated as extension so
    ``.eslintrc.json`` -> (".", "eslintrc", ".json") and
    ``MyComponent.test.ts`` -> ("", "MyComponent", ".test.ts").
    """
    stripped = name.lstrip(".")
    leading = name[: len(name) - len(stripped)]
    stem, dot, rest = stripped.partition(".")
    return leading, stem, f"{dot}{rest}"


def suggest_name(name: str, casing: Casing) -> str:
    """Return ``name`` with its stem converted and its extensions kept."""
    leading, stem, extensions = split_name(name)
    if not stem:
        return name
    return f"{leading}{convert(stem, casing)}{extensions}"
