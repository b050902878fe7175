"""String predicates: anagrams, palindromes and bracket matching."""

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` is a rearrangement of the characters of ``s``."""
    if len(s) != len(t):
        return False
    return sorted(s) == sorted(t)


def is_palindrome(s: str) -> bool:
    """Whether the ASCII letters and digits of ``s`` read the same both ways, ignoring case."""
    filtered = "".join(c.lower() for c in s if c.isascii() and c.isalnum())
    return filtered == filtered[::-1]


def is_valid_parentheses(s: str) -> bool:
    """Whether every bracket closes in order; any other character is invalid."""
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack or _PAIRS.get(char) != stack[-1]:
            return False
        stack.pop()
    return not stack