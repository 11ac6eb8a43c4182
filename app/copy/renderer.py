"""
Plan Response Renderer
======================
Turns the model's free-text plan into two HTML fragments: the workout plan
and the supplement block.

The model is asked (see app.prompt.builder) to use a small markdown-like
grammar. Rendering is a single left-to-right pass over the lines, modelled
as a finite-state machine:

    state  = (section, list_open)
    section: PLAN -> SUPPLEMENTS on "## RECOMMENDED SUPPLEMENTS", never back

Line recognition, first match wins (lines are stripped first):

    ## RECOMMENDED SUPPLEMENTS  -> switch to SUPPLEMENTS, fixed heading
    ### text                    -> h3 (exercise-name / supplement-name)
    ## text                     -> h2 section heading
    # text                      -> day heading
    **text**  (len > 4)         -> bold paragraph
    • text                      -> list item (opens <ul> if needed)
    (blank)                     -> <br>
    anything else               -> paragraph

Every non-bullet line closes an open list first, and a list still open at
end of input is closed in the active section, so list tags are always
balanced.

Rules:
- No failure mode: any line renders as something, worst case a paragraph
- Text content is HTML-escaped unless escape=False (trusted input only)
"""

import html
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


SUPPLEMENT_SECTION_MARKER = "## RECOMMENDED SUPPLEMENTS"
SUPPLEMENT_SECTION_HEADING = '<h2 class="section-heading">RECOMMENDED SUPPLEMENTS</h2>'

BULLET_PREFIX = "• "
BOLD_MARKER = "**"

LIST_OPEN = "<ul>"
LIST_CLOSE = "</ul>"
LINE_BREAK = "<br>"


class Section(str, Enum):
    """Output fragment a line is rendered into."""
    PLAN = "plan"
    SUPPLEMENTS = "supplements"


class LineKind(str, Enum):
    """Recognized line patterns, in match priority order."""
    SECTION_MARKER = "section_marker"
    SUBSECTION_HEADING = "subsection_heading"
    SECTION_HEADING = "section_heading"
    DAY_HEADING = "day_heading"
    BOLD = "bold"
    BULLET = "bullet"
    BLANK = "blank"
    PARAGRAPH = "paragraph"


# h3 class differs by section: exercises in the plan, products in supplements
SUBSECTION_CLASS = {
    Section.PLAN: "subsection-heading exercise-name",
    Section.SUPPLEMENTS: "subsection-heading supplement-name",
}


@dataclass(frozen=True)
class FormatterState:
    """Renderer state carried from one line to the next."""
    section: Section = Section.PLAN
    list_open: bool = False


INITIAL_STATE = FormatterState()


@dataclass(frozen=True)
class Emission:
    """An HTML chunk destined for one of the two fragments."""
    section: Section
    html: str


@dataclass
class FormattedOutput:
    """Result of rendering one model response."""
    plan: str
    supplements: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "plan": self.plan,
            "supplements": self.supplements,
        }


def classify_line(line: str) -> LineKind:
    """
    Classify an already-stripped line.

    Longer heading prefixes are tested first so "### x" is never taken
    for "## x".
    """
    if line.startswith(SUPPLEMENT_SECTION_MARKER):
        return LineKind.SECTION_MARKER
    if line.startswith("### "):
        return LineKind.SUBSECTION_HEADING
    if line.startswith("## "):
        return LineKind.SECTION_HEADING
    if line.startswith("# "):
        return LineKind.DAY_HEADING
    if line.startswith(BOLD_MARKER) and line.endswith(BOLD_MARKER) and len(line) > 4:
        return LineKind.BOLD
    if line.startswith(BULLET_PREFIX):
        return LineKind.BULLET
    if line == "":
        return LineKind.BLANK
    return LineKind.PARAGRAPH


def _text(value: str, escape: bool) -> str:
    return html.escape(value, quote=False) if escape else value


def render_block(kind: LineKind, line: str, section: Section, escape: bool = True) -> str:
    """Render a single non-list, non-marker line as HTML."""
    if kind is LineKind.SUBSECTION_HEADING:
        return f'<h3 class="{SUBSECTION_CLASS[section]}">{_text(line[4:].strip(), escape)}</h3>'
    if kind is LineKind.SECTION_HEADING:
        return f'<h2 class="section-heading">{_text(line[3:].strip(), escape)}</h2>'
    if kind is LineKind.DAY_HEADING:
        return f'<h3 class="day-heading">{_text(line[2:].strip(), escape)}</h3>'
    if kind is LineKind.BOLD:
        return f"<p><strong>{_text(line[2:-2].strip(), escape)}</strong></p>"
    if kind is LineKind.BLANK:
        return LINE_BREAK
    if kind is LineKind.PARAGRAPH:
        return f"<p>{_text(line, escape)}</p>"
    raise ValueError(f"render_block does not handle {kind.value} lines")


def transition(
    state: FormatterState,
    line: str,
    escape: bool = True,
) -> Tuple[FormatterState, List[Emission]]:
    """
    Advance the renderer by one input line.

    Pure function: returns the next state and the HTML chunks to append,
    each tagged with the fragment it belongs to.
    """
    line = line.strip()
    kind = classify_line(line)
    section = state.section
    emissions: List[Emission] = []

    if kind is LineKind.BULLET:
        if not state.list_open:
            emissions.append(Emission(section, LIST_OPEN))
        emissions.append(Emission(section, f"<li>{_text(line[len(BULLET_PREFIX):].strip(), escape)}</li>"))
        return FormatterState(section, True), emissions

    if state.list_open:
        emissions.append(Emission(section, LIST_CLOSE))

    if kind is LineKind.SECTION_MARKER:
        emissions.append(Emission(Section.SUPPLEMENTS, SUPPLEMENT_SECTION_HEADING))
        return FormatterState(Section.SUPPLEMENTS, False), emissions

    emissions.append(Emission(section, render_block(kind, line, section, escape)))
    return FormatterState(section, False), emissions


def finish(state: FormatterState) -> List[Emission]:
    """Emissions needed at end of input (close a dangling list)."""
    if state.list_open:
        return [Emission(state.section, LIST_CLOSE)]
    return []


def format_response(raw_text: Optional[str], escape: bool = True) -> FormattedOutput:
    """
    Render a model response into plan and supplement HTML fragments.

    Args:
        raw_text: Model output; expected but not guaranteed to follow the
                  prompt's grammar
        escape: HTML-escape text content (default). Pass False only for
                trusted text that may carry its own markup.

    Returns:
        FormattedOutput with the two fragments
    """
    fragments: Dict[Section, List[str]] = {
        Section.PLAN: [],
        Section.SUPPLEMENTS: [],
    }

    state = INITIAL_STATE
    for line in (raw_text or "").split("\n"):
        state, emissions = transition(state, line, escape)
        for emission in emissions:
            fragments[emission.section].append(emission.html)

    for emission in finish(state):
        fragments[emission.section].append(emission.html)

    return FormattedOutput(
        plan="".join(fragments[Section.PLAN]),
        supplements="".join(fragments[Section.SUPPLEMENTS]),
    )
