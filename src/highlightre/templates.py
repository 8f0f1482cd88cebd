"""Starter content written by the 'init' command."""

STARTER_SUITE_YAML = """\
# HighlightRe suite file.
# Use single quotes (or block scalars) for strings; double quotes are rejected
# because their escapes would change regex patterns.
name: 'my-lessons'
sections:
  - name: 'Quantifiers'
    cases:
      - name: 'exactly five a'
        text: 'aaaaaaa'
        pattern: 'a{5}'
        flags: 'g'
        expected: '<b>aaaaa</b>aa'
  - name: 'Flags'
    cases:
      - name: 'case-insensitive'
        text: 'Is this This?'
        pattern: 'is'
        flags: 'gi'
        expected: '<b>Is</b> th<b>is</b> Th<b>is</b>?'
      - name: 'line anchors'
        text: |-
          12/1/16
          12-16-13
        pattern: '^12.+16$'
        flags: 'gm'
        expected: |-
          <b>12/1/16</b>
          12-16-13
  - name: 'Backreferences'
    cases:
      - name: 'replace tags'
        text: '<b>Bold</b><i>italics</i>'
        pattern: '<(\\w+)>(.*)</\\1>'
        template: '\\2\\n'
        expected: |
          Bold
          italics
"""
