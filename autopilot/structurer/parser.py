"""
Rebuild an AnalysisRecord from the model's free-text reply.

The reply is split into blank-line-delimited sections. The first line of a
section is its heading, the rest is its body. Headings are matched against an
ordered rule table; the first matching rule decides which field the body fills.
Parsing never fails: anything unrecognized is dropped.
"""

import logging
import re
from dataclasses import dataclass, field, replace
from typing import Callable

from .record import AnalysisRecord

logger = logging.getLogger(__name__)

SECTION_DELIMITER = "\n\n"

_BULLET = re.compile(r"^- ")


def _join_words(body: list[str]) -> str:
    return " ".join(body).strip()


def _split_items(body: list[str]) -> tuple[str, ...]:
    # blank lines stay as empty entries
    return tuple(_BULLET.sub("", line, count=1).strip() for line in body)


def _join_lines(body: list[str]) -> str:
    return "\n".join(body)


@dataclass(frozen=True)
class SectionRule:
    """Fill `field` with `transform(body)` when the heading contains any keyword."""
    keywords: tuple[str, ...]
    field: str
    transform: Callable[[list[str]], object]

    def matches(self, heading: str) -> bool:
        heading = heading.lower()
        return any(k in heading for k in self.keywords)


DEFAULT_RULES: tuple[SectionRule, ...] = (
    SectionRule(("project name",), "project_name", _join_words),
    SectionRule(("tech stack",), "tech_stack", _split_items),
    SectionRule(("project purpose", "project ideas"), "project_ideas", _split_items),
    SectionRule(("folder structure",), "folder_structure_analysis", _join_lines),
    SectionRule(("summary",), "summary", _join_lines),
)


@dataclass
class TraceEvent:
    kind: str  # matched, unmatched, overwritten
    heading: str
    field: str = ""
    previous: object = None


@dataclass
class ParseTrace:
    """Collects what the parser did with each section. Optional; for diagnostics and tests."""
    events: list[TraceEvent] = field(default_factory=list)

    def record(self, event: TraceEvent) -> None:
        self.events.append(event)

    @property
    def unmatched(self) -> list[str]:
        return [e.heading for e in self.events if e.kind == "unmatched"]

    @property
    def overwritten(self) -> list[str]:
        return [e.field for e in self.events if e.kind == "overwritten"]

    @property
    def matched(self) -> list[str]:
        return [e.field for e in self.events if e.kind == "matched"]


def split_sections(raw_text: str) -> list[tuple[str, list[str]]]:
    """Split reply text into (heading, body lines) pairs."""
    sections = []
    for block in raw_text.split(SECTION_DELIMITER):
        lines = block.split("\n")
        sections.append((lines[0], lines[1:]))
    return sections


def parse_response(
    raw_text: str,
    trace: ParseTrace | None = None,
    rules: tuple[SectionRule, ...] = DEFAULT_RULES,
) -> AnalysisRecord:
    """
    Parse a model reply into an AnalysisRecord.
    A field set by more than one section keeps the last value.
    """
    values: dict[str, object] = {}
    for heading, body in split_sections(raw_text):
        rule = next((r for r in rules if r.matches(heading)), None)
        if rule is None:
            logger.debug("Dropping unrecognized section %r", heading)
            if trace is not None:
                trace.record(TraceEvent("unmatched", heading))
            continue
        if rule.field in values:
            logger.debug("Section %r overwrites %s", heading, rule.field)
            if trace is not None:
                trace.record(TraceEvent("overwritten", heading, rule.field, values[rule.field]))
        values[rule.field] = rule.transform(body)
        if trace is not None:
            trace.record(TraceEvent("matched", heading, rule.field))
    return replace(AnalysisRecord(), **values)
