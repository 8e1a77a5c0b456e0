"""String matching, parsing and formatting algorithms."""

from __future__ import annotations

import re
from fractions import Fraction
from typing import Iterable, List

_BELOW_TWENTY = (
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
)
_TENS = (
    "", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty",
    "Ninety",
)
_SCALES = ("", "Thousand", "Million", "Billion")
_MAX_WORDS_VALUE = 2**31 - 1

_FRACTION_TERM = re.compile(r"([+-]?\d+)/(\d+)")


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    seen: set[str] = set()
    left = 0
    best = 0
    for right, char in enumerate(s):
        while char in seen:
            seen.discard(s[left])
            left += 1
        seen.add(char)
        best = max(best, right - left + 1)
    return best


def regex_match(s: str, p: str) -> bool:
    """Tell whether ``p`` matches all of ``s``; '.' is any char, 'x*' repeats x."""
    if p.startswith("*"):
        raise ValueError("pattern must not start with '*'")
    m, n = len(s), len(p)
    dp = [[False] * (n + 1) for _ in range(m + 1)]
    dp[0][0] = True
    for j in range(2, n + 1):
        if p[j - 1] == "*":
            dp[0][j] = dp[0][j - 2]
    for i in range(1, m + 1):
        char = s[i - 1]
        for j in range(1, n + 1):
            token = p[j - 1]
            if token == "." or token == char:
                dp[i][j] = dp[i - 1][j - 1]
            elif token == "*":
                dp[i][j] = dp[i][j - 2]
                if p[j - 2] in (".", char):
                    dp[i][j] = dp[i][j] or dp[i - 1][j]
    return dp[m][n]


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed parentheses substring."""
    stack = [-1]
    best = 0
    for index, char in enumerate(s):
        if char == "(":
            stack.append(index)
            continue
        stack.pop()
        if stack:
            best = max(best, index - stack[-1])
        else:
            stack.append(index)
    return best


def wildcard_match(s: str, p: str) -> bool:
    """Tell whether ``p`` matches all of ``s``; '?' is any char, '*' any run."""
    m, n = len(s), len(p)
    dp = [[False] * (n + 1) for _ in range(m + 1)]
    dp[0][0] = True
    for j in range(1, n + 1):
        if p[j - 1] == "*":
            dp[0][j] = dp[0][j - 1]
    for i in range(1, m + 1):
        char = s[i - 1]
        for j in range(1, n + 1):
            token = p[j - 1]
            if token == char or token == "?":
                dp[i][j] = dp[i - 1][j - 1]
            elif token == "*":
                dp[i][j] = dp[i - 1][j] or dp[i][j - 1]
    return dp[m][n]


def min_cut(s: str) -> int:
    """Return the fewest cuts that split ``s`` into palindromes."""
    n = len(s)
    if n == 0:
        return 0
    palindrome = [[False] * n for _ in range(n)]
    cuts: List[int] = []
    for i in range(n):
        best = i
        for j in range(i + 1):
            if s[j] == s[i] and (i - j < 2 or palindrome[j + 1][i - 1]):
                palindrome[j][i] = True
                best = 0 if j == 0 else min(best, cuts[j - 1] + 1)
        cuts.append(best)
    return cuts[-1]


def _below_hundred(num: int) -> str:
    if num < 20:
        return _BELOW_TWENTY[num]
    tens, rest = divmod(num, 10)
    return " ".join(word for word in (_TENS[tens], _BELOW_TWENTY[rest]) if word)


def _below_thousand(num: int) -> str:
    if num < 100:
        return _below_hundred(num)
    hundreds, rest = divmod(num, 100)
    words = [_BELOW_TWENTY[hundreds], "Hundred"]
    if rest:
        words.append(_below_hundred(rest))
    return " ".join(words)


def number_to_words(num: int) -> str:
    """Spell a non-negative 32-bit integer in English words."""
    if num < 0 or num > _MAX_WORDS_VALUE:
        raise ValueError(f"{num} is outside 0..{_MAX_WORDS_VALUE}")
    if num == 0:
        return "Zero"
    groups: List[str] = []
    for scale in _SCALES:
        if num == 0:
            break
        num, chunk = divmod(num, 1000)
        if chunk:
            words = _below_thousand(chunk)
            groups.append(f"{words} {scale}" if scale else words)
    return " ".join(reversed(groups))


def fraction_addition(expression: str) -> str:
    """Evaluate a sum of signed fractions such as '-1/2+1/3' as 'num/den'."""
    text = "".join(expression.split())
    total = Fraction(0)
    position = 0
    while position < len(text):
        match = _FRACTION_TERM.match(text, position)
        if match is None:
            raise ValueError(f"malformed fraction at position {position}")
        numerator, denominator = int(match.group(1)), int(match.group(2))
        if denominator == 0:
            raise ValueError("denominator must not be zero")
        total += Fraction(numerator, denominator)
        position = match.end()
    return f"{total.numerator}/{total.denominator}"


def count_seniors(details: Iterable[str]) -> int:
    """Count passenger records whose age (characters 11-12) is over 60."""
    return sum(1 for detail in details if int(detail[11:13]) > 60)