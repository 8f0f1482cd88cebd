"""
Regex lesson tests for HighlightRe.

Each test highlights the matches of one pattern in a literal text and compares
the result with the exact expected markup. Together they walk through:

- Character sets, ranges and shorthand classes
- Quantifiers, greedy and lazy
- Groups, named groups and backreferences
- Lookahead and lookbehind
- Anchors and word boundaries
- Flags (global, IGNORECASE, MULTILINE) and Unicode text

Run tests with: pytest tests/regex_tests -v
"""
