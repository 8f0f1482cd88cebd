"""Handles the parsing and validation of HighlightRe suite files."""

import logging
from pathlib import Path
from typing import Any

import regex
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .types import Pattern, Sample

logger = logging.getLogger(__name__)


class CaseConfig(BaseModel):
    """A single example case as written in a suite file."""

    model_config = ConfigDict(extra="forbid")

    name: str
    text: str
    pattern: str
    expected: str
    flags: str = "g"
    template: str | None = None
    group: int | str | None = None

    @field_validator("flags")
    @classmethod
    def _check_flags(cls, value: str) -> str:
        # Reuse the Pattern parser so both entry points reject the same letters.
        Pattern.from_flags("", value)
        return value

    @model_validator(mode="after")
    def _check_pattern(self) -> "CaseConfig":
        if self.template is not None and self.group is not None:
            msg = f"Case '{self.name}' cannot define both 'template' and 'group'."
            raise ValueError(msg)
        pattern = self.to_pattern()
        try:
            compiled = pattern.compile()
        except regex.error as e:
            msg = f"Invalid regex pattern in case '{self.name}': {e}"
            raise ValueError(msg) from e
        if isinstance(self.group, str):
            missing = self.group not in compiled.groupindex
        else:
            missing = self.group is not None and not 0 <= self.group <= compiled.groups
        if missing:
            msg = f"Case '{self.name}' highlights group {self.group!r}, which its pattern does not define."
            raise ValueError(msg)
        if self.template is not None:
            # The engine only parses a template when it first applies it to a match.
            try:
                compiled.sub(self.template, self.text, count=pattern.count)
            except (regex.error, IndexError, KeyError) as e:
                msg = f"Invalid template in case '{self.name}': {e}"
                raise ValueError(msg) from e
        return self

    def to_pattern(self) -> Pattern:
        """Build the immutable Pattern described by this case."""
        return Pattern.from_flags(self.pattern, self.flags)

    def to_sample(self, section: str = "") -> Sample:
        """Build the runtime Sample for this case."""
        return Sample(
            name=self.name,
            text=self.text,
            pattern=self.to_pattern(),
            expected=self.expected,
            template=self.template,
            group=self.group,
            section=section,
        )


class SectionConfig(BaseModel):
    """A named group of cases."""

    model_config = ConfigDict(extra="forbid")

    name: str
    cases: list[CaseConfig] = Field(default_factory=list)


class SuiteConfig(BaseModel):
    """The root of a suite file."""

    model_config = ConfigDict(extra="forbid")

    name: str = "suite"
    sections: list[SectionConfig] = Field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SuiteConfig":
        """
        Create a SuiteConfig from a parsed YAML mapping.

        Raises:
            ValueError: If the mapping does not describe a valid suite.

        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            msg = f"Invalid or missing configuration: {e}"
            raise ValueError(msg) from e

    def samples(self) -> list[Sample]:
        """Flatten every section into runtime samples, in file order."""
        return [case.to_sample(section.name) for section in self.sections for case in section.cases]


class StrictSingleQuoteLoader(yaml.SafeLoader):
    """
    A YAML loader that enforces single quotes for quoted strings.

    Double-quoted scalars process backslash escapes, which silently changes regex
    patterns such as '\\d' or '\\b'. Plain, single-quoted and block scalars are accepted.
    """


def _construct_scalar(loader: StrictSingleQuoteLoader, node: yaml.ScalarNode) -> Any:  # noqa: ANN401
    """Construct a scalar node, but first check its style."""
    if node.style == '"':
        line = node.start_mark.line + 1
        col = node.start_mark.column + 1
        msg = f"Double-quoted string found at line {line}, column {col}. Please use single quotes (') instead."
        raise yaml.YAMLError(msg)
    return loader.construct_scalar(node)


StrictSingleQuoteLoader.add_constructor("tag:yaml.org,2002:str", _construct_scalar)


def parse_suite(content: str, default_name: str = "suite") -> SuiteConfig:
    """
    Parse and validate suite YAML content.

    Raises:
        yaml.YAMLError: If there is a syntax error or a double-quoted string.
        ValueError: If the content is not a valid suite.

    """
    data = yaml.load(content, Loader=StrictSingleQuoteLoader)  # noqa: S506
    if not isinstance(data, dict):
        msg = "Suite file must be a YAML mapping (dictionary)."
        raise ValueError(msg)  # noqa: TRY004
    data.setdefault("name", default_name)
    return SuiteConfig.from_dict(data)


def load_suite(suite_path: str | Path) -> SuiteConfig:
    """
    Load, parse, and validate a YAML suite file.

    Args:
        suite_path: The path to the suite file.

    Returns:
        A SuiteConfig named after the file stem unless the file names itself.

    Raises:
        FileNotFoundError: If the suite file does not exist.
        yaml.YAMLError: If there is a syntax error in the YAML file.
        ValueError: If the suite is invalid.

    """
    path = Path(suite_path)
    if not path.is_file():
        msg = f"Suite file not found at: {suite_path}"
        raise FileNotFoundError(msg)

    try:
        with path.open(encoding="utf-8") as f:
            suite = parse_suite(f.read(), default_name=path.stem)
    except yaml.YAMLError as e:
        msg = f"Error parsing YAML suite file {path}: {e}"
        raise yaml.YAMLError(msg) from e
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        msg = f"Invalid suite file {path}: {e}"
        raise ValueError(msg) from e

    logger.debug("Loaded suite '%s' with %d section(s) from %s", suite.name, len(suite.sections), path)
    return suite
