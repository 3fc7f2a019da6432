"""Query term classification and shell wildcard translation."""

import re
from dataclasses import dataclass
from enum import Enum

NUMERIC_ID_PATTERN = re.compile(r"^\d+$")


class TermKind(Enum):
    LITERAL = "literal"
    NUMERIC_ID = "numeric_id"
    WILDCARD = "wildcard"


@dataclass(frozen=True)
class QueryTerm:
    """A single user query, classified as a name, an id or a wildcard."""

    kind: TermKind
    text: str
    file_id: int | None = None
    pattern: re.Pattern[str] | None = None

    def matches_name(self, name: str) -> bool:
        if self.kind is TermKind.WILDCARD:
            assert self.pattern is not None
            return self.pattern.fullmatch(name) is not None
        if self.kind is TermKind.LITERAL:
            return self.text == name
        return False


def classify_term(text: str) -> QueryTerm:
    if NUMERIC_ID_PATTERN.match(text):
        return QueryTerm(TermKind.NUMERIC_ID, text, file_id=int(text))
    if contains_wildcard(text):
        return QueryTerm(TermKind.WILDCARD, text, pattern=compile_wildcard(text))
    return QueryTerm(TermKind.LITERAL, text)


def classify_terms(texts: list[str] | tuple[str, ...]) -> list[QueryTerm]:
    return [classify_term(text) for text in texts]


def contains_wildcard(text: str) -> bool:
    """Check for an unescaped ``*``, ``?``, ``[...]`` class or ``{a,b}`` group."""
    i = 0
    while i < len(text):
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char in "*?":
            return True
        if char == "[" and _find_class_end(text, i) is not None:
            return True
        if char == "{" and _find_brace_end(text, i) is not None:
            return True
        i += 1
    return False


def compile_wildcard(text: str) -> re.Pattern[str]:
    """Compile a Unix shell wildcard into a whole-string regex."""
    return re.compile(rf"\A(?:{wildcard_to_regex(text)})\Z", re.DOTALL)


def wildcard_to_regex(text: str) -> str:
    parts: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]

        if char == "\\" and i + 1 < len(text):
            parts.append(re.escape(text[i + 1]))
            i += 2
            continue

        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        elif char == "[" and (end := _find_class_end(text, i)) is not None:
            parts.append(_translate_class(text[i + 1 : end]))
            i = end
        elif char == "{" and (brace := _find_brace_end(text, i)) is not None:
            end, commas = brace
            bounds = [i, *commas, end]
            alternatives = [
                wildcard_to_regex(text[start + 1 : stop]) for start, stop in zip(bounds, bounds[1:])
            ]
            parts.append("(?:" + "|".join(alternatives) + ")")
            i = end
        else:
            parts.append(re.escape(char))
        i += 1

    return "".join(parts)


def _find_class_end(text: str, start: int) -> int | None:
    # A ']' right after '[' or '[!' is a literal member of the class.
    i = start + 1
    if i < len(text) and text[i] in "!^":
        i += 1
    if i < len(text) and text[i] == "]":
        i += 1
    while i < len(text):
        if text[i] == "]":
            return i
        i += 1
    return None


def _find_brace_end(text: str, start: int) -> tuple[int, list[int]] | None:
    depth = 0
    commas: list[int] = []
    i = start
    while i < len(text):
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return (i, commas) if commas else None
        elif char == "," and depth == 1:
            commas.append(i)
        i += 1
    return None


def _translate_class(body: str) -> str:
    # Reversed ranges such as z-a match nothing, the same as in the shell.
    negate = body[:1] in ("!", "^")
    if negate:
        body = body[1:]

    members: list[str] = []
    i = 0
    while i < len(body):
        if i + 2 < len(body) and body[i + 1] == "-":
            low, high = body[i], body[i + 2]
            if low <= high:
                members.append(_escape_class_char(low) + "-" + _escape_class_char(high))
            i += 3
        else:
            members.append(_escape_class_char(body[i]))
            i += 1

    if not members:
        return "." if negate else "(?!)"
    return "[" + ("^" if negate else "") + "".join(members) + "]"


def _escape_class_char(char: str) -> str:
    return "\\" + char if char in "\\^[]-" else char
