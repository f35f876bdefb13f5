"""String algorithms: bracket matching, pattern search and small parsers."""

from __future__ import annotations

from collections import Counter

_OPENING = "([{"
_MATCH = {")": "(", "}": "{", "]": "["}
_MODULUS = 10**9 + 7


def is_balanced(expression: str) -> bool:
    """Return whether the brackets in ``expression`` are balanced.

    Any other character is rejected when no bracket is open and ignored
    otherwise.
    """
    stack: list[str] = []
    for ch in expression:
        if ch in _OPENING:
            stack.append(ch)
            continue
        if not stack:
            return False
        if ch in _MATCH and stack.pop() != _MATCH[ch]:
            return False
    return not stack


def count_anagrams(pattern: str, text: str) -> int:
    """Count the windows of ``text`` that are anagrams of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    needed = Counter(pattern)
    outstanding = len(needed)
    width = len(pattern)
    found = 0
    for j, ch in enumerate(text):
        if ch in needed:
            needed[ch] -= 1
            if needed[ch] == 0:
                outstanding -= 1
        if j >= width - 1:
            if outstanding == 0:
                found += 1
            leaving = text[j - width + 1]
            if leaving in needed:
                if needed[leaving] == 0:
                    outstanding += 1
                needed[leaving] += 1
    return found


def prefix_function(pattern: str) -> list[int]:
    """Return the longest proper prefix-suffix length for each prefix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(pattern: str, text: str) -> list[int]:
    """Return every index at which ``pattern`` starts in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    matches: list[int] = []
    i = j = 0
    while i < len(text):
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == len(pattern):
            matches.append(i - j)
            j = lps[j - 1]
        elif i < len(text) and pattern[j] != text[i]:
            if j:
                j = lps[j - 1]
            else:
                i += 1
    return matches


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single digits and ``+ - * /``."""
    stack: list[int] = []
    for ch in expression:
        if "0" <= ch <= "9":
            stack.append(ord(ch) - ord("0"))
            continue
        operation = _OPERATORS.get(ch)
        if operation is None:
            raise ValueError(f"unexpected character {ch!r}")
        if len(stack) < 2:
            raise ValueError(f"operator {ch!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def count_decodings(digits: str) -> int:
    """Count the ways to read ``digits`` as letters A=1 .. Z=26, mod 10**9+7."""
    if any(not "0" <= ch <= "9" for ch in digits):
        raise ValueError("input must consist of decimal digits")
    before, current = 1, 1
    for first, second in zip(digits, digits[1:]):
        following = current
        if int(first) * 10 + int(second) <= 26:
            following += before
        before, current = current, following % _MODULUS
    return current