"""String algorithms: substrings, palindromes and bracket matching."""

_CLOSING = {")": "(", "}": "{", "]": "["}


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, ch in enumerate(s):
        if ch in last_seen:
            start = max(start, last_seen[ch] + 1)
        best = max(best, index - start + 1)
        last_seen[ch] = index
    return best


def _expand(s: str, lo: int, hi: int) -> tuple[int, int]:
    while lo > 0 and hi < len(s) - 1 and s[lo - 1] == s[hi + 1]:
        lo -= 1
        hi += 1
    return lo, hi


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring, preferring odd lengths and earlier positions on ties."""
    best = ""
    for center in range(len(s)):
        lo, hi = _expand(s, center, center)
        if hi - lo + 1 > len(best):
            best = s[lo : hi + 1]
    for center in range(len(s) - 1):
        if s[center] == s[center + 1]:
            lo, hi = _expand(s, center, center + 1)
            if hi - lo + 1 > len(best):
                best = s[lo : hi + 1]
    return best


def is_valid_brackets(s: str) -> bool:
    """Return True if every bracket is closed by a matching one in order.

    Any character that is not a closing bracket is treated as an opener.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _CLOSING:
            if not stack or stack.pop() != _CLOSING[ch]:
                return False
        else:
            stack.append(ch)
    return not stack