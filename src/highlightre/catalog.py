"""
The built-in example catalog.

Each section groups lessons about one family of regex features. A lesson is a
literal input text, a pattern with its flags and the exact output expected once
every match has been highlighted (or substituted through a template).
"""

from dataclasses import replace
from typing import Final

from highlightre.types import Pattern, Sample

_ANIMALS: Final[str] = "cat mat bat Hat ?at 0at"


def _section(name: str, *samples: Sample) -> tuple[Sample, ...]:
    """Stamp the section name onto each sample of a section."""
    return tuple(replace(sample, section=name) for sample in samples)


INTRODUCTION = _section(
    "Introduction",
    Sample(
        name="find pattern",
        text="Is this This?",
        pattern=Pattern.from_flags("is", "gi"),
        expected="<b>Is</b> th<b>is</b> Th<b>is</b>?",
    ),
)

PLAIN_TEXT = _section(
    "Find plain text patterns",
    Sample(
        name="any character followed by at",
        text="Cat sat on the hat.",
        pattern=Pattern.from_flags(".at", "gi"),
        expected="<b>Cat</b> <b>sat</b> on the <b>hat</b>.",
    ),
    # The dot matches letters, digits and punctuation but never a line break.
    Sample(
        name="seven characters",
        text="Cat\nsat on\nthe hat.",
        pattern=Pattern.from_flags("......."),
        expected="Cat\nsat on\n<b>the hat</b>.",
    ),
    Sample(
        name="escaped dot",
        text="Cat sat on the hat.",
        pattern=Pattern.from_flags(r"\."),
        expected="Cat sat on the hat<b>.</b>",
    ),
)

REPEATED = _section(
    "Find repeated patterns",
    Sample(
        name="exactly five a",
        text="aaaaaaa",
        pattern=Pattern.from_flags("a{5}"),
        expected="<b>aaaaa</b>aa",
    ),
    Sample(
        name="at least five and up to six a",
        text="aaaaaaa",
        pattern=Pattern.from_flags("a{5,6}"),
        expected="<b>aaaaaa</b>a",
    ),
    Sample(
        name="http or https",
        text="http://egghead.io\nnot a web address\nhttp://\nhttps://www.egghead.io",
        pattern=Pattern.from_flags("https?://.+"),
        expected="<b>http://egghead.io</b>\nnot a web address\nhttp://\n<b>https://www.egghead.io</b>",
    ),
)

CHARACTER_SETS = _section(
    "Find sets of characters",
    Sample(
        name="included characters",
        text=_ANIMALS,
        pattern=Pattern.from_flags("[bc]at"),
        expected="<b>cat</b> mat <b>bat</b> Hat ?at 0at",
    ),
    Sample(
        name="negated characters",
        text=_ANIMALS,
        pattern=Pattern.from_flags("[^bc]at"),
        expected="cat <b>mat</b> bat <b>Hat</b> <b>?at</b> <b>0at</b>",
    ),
    Sample(
        name="ranges",
        text=_ANIMALS,
        pattern=Pattern.from_flags("[a-zA-Z]at"),
        expected="<b>cat</b> <b>mat</b> <b>bat</b> <b>Hat</b> ?at 0at",
    ),
    Sample(
        name="negated ranges",
        text=_ANIMALS,
        pattern=Pattern.from_flags("[^a-zA-Z]at"),
        expected="cat mat bat Hat <b>?at</b> <b>0at</b>",
    ),
    Sample(
        name="special characters in ranges",
        text=_ANIMALS,
        pattern=Pattern.from_flags("[a-zA-Z0-9?]at"),
        expected="<b>cat</b> <b>mat</b> <b>bat</b> <b>Hat</b> <b>?at</b> <b>0at</b>",
    ),
)

SHORTHAND = _section(
    "Use shorthand to find common sets of characters",
    Sample(
        name="non-whitespace shorthand",
        text="Au $1 5.5%",
        pattern=Pattern.from_flags(r"[\S]"),
        expected="<b>A</b><b>u</b> <b>$</b><b>1</b> <b>5</b><b>.</b><b>5</b><b>%</b>",
    ),
)

GROUPS = _section(
    "Find groups of characters",
    Sample(
        name="area code with groups",
        text="800-456-7890\n(555) 456-7890\n4564567890",
        pattern=Pattern.from_flags(r"\(?(\d{3})\)?[\s-]?\d{3}[\s-]?\d{4}"),
        expected="<b>800</b>\n<b>555</b>\n<b>456</b>",
        group=1,
    ),
)

LOOKAHEAD = _section(
    "Find a string that precedes another string",
    Sample(
        name="foo not followed by bar or boo",
        text="foo foobar foobaz fooboo",
        pattern=Pattern.from_flags("foo(?!bar|boo)"),
        expected="<b>foo</b> foobar <b>foo</b>baz fooboo",
    ),
)

WORD_BOUNDARIES = _section(
    "Find the start and end of whole words",
    Sample(
        name="inside a word only",
        text="This history is his, it is",
        pattern=Pattern.from_flags(r"\Bis\B"),
        expected="This h<b>is</b>tory is his, it is",
    ),
)

BACKREFERENCES = _section(
    "Match the same string twice",
    Sample(
        name="replace tags",
        text="<b>Bold</b><i>italics</i>",
        pattern=Pattern.from_flags(r"<(\w+)>(.*)</\1>"),
        expected="Bold\nitalics\n",
        template=r"\2\n",
    ),
)

LINE_ANCHORS = _section(
    "Match the start and end of a line",
    Sample(
        name="dates starting with 12 and ending with 16",
        text="12/1/16\n12-16-13\n11/12/16\n12-12-2016",
        pattern=Pattern.from_flags("^12.+16$", "gm"),
        expected="<b>12/1/16</b>\n12-16-13\n11/12/16\n<b>12-12-2016</b>",
    ),
)

SECTIONS: Final[dict[str, tuple[Sample, ...]]] = {
    section[0].section: section
    for section in (
        INTRODUCTION,
        PLAIN_TEXT,
        REPEATED,
        CHARACTER_SETS,
        SHORTHAND,
        GROUPS,
        LOOKAHEAD,
        WORD_BOUNDARIES,
        BACKREFERENCES,
        LINE_ANCHORS,
    )
}


def all_samples() -> list[Sample]:
    """Return every catalog sample, section by section."""
    return [sample for samples in SECTIONS.values() for sample in samples]
