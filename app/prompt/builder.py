"""
Plan Prompt Builder
===================
Deterministic assembly of the prompt sent to the generative model.

The formatting directives embedded here define the grammar that
app.copy.renderer parses back into HTML:
- "# " day headings, "## " section headings, "### " exercise/product names
- "• " detail bullets
- "**term**" bold lines
- a "## RECOMMENDED SUPPLEMENTS" block with "### " per product

The model is asked, not forced, to follow them; the renderer tolerates
anything else.
"""

from typing import List, Sequence

from app.catalog.models import SupplementRecord
from app.copy.renderer import SUPPLEMENT_SECTION_MARKER
from .models import UserInput, NOT_SPECIFIED


MOTIVATIONAL_PHRASE = (
    "The gravity is heavier, the air is thinner and the heat is rising - "
    "can you handle the chamber?"
)

NO_SUPPLEMENTS_TEXT = "No specific supplements recommended based on current data."

REFER_TO_PACKAGING = "Refer to packaging"

OPTIONAL_COMPONENTS = (
    ("include_warmup", "- General Warm-up Protocol (dynamic stretches, light cardio)."),
    ("include_nutrition", (
        "- Provide specific, actionable nutrition strategies relevant to the primary fitness goal "
        "(e.g., evidence-based macronutrient targets for muscle hypertrophy, detailed calorie "
        "deficit planning for fat loss, nutrient timing considerations)."
    )),
    ("include_cooldown", "- Include appropriate cool-down routines for each workout day."),
    ("include_progression", (
        "- Provide a scientifically-sound progression plan to advance beyond this initial program "
        "(e.g., double progression, RPE adjustments)."
    )),
)


def _humanize(value: str) -> str:
    return value.replace("_", " ") if value else NOT_SPECIFIED


def format_supplements_for_prompt(selected: Sequence[SupplementRecord]) -> str:
    """
    Render the selected supplements as the instruction block of the prompt.

    An empty selection yields a neutral "no recommendations" sentence so the
    prompt is still complete when the catalog failed to load.
    """
    if not selected:
        return NO_SUPPLEMENTS_TEXT

    lines: List[str] = [
        "Recommended HTC Supplements (Include these EXACTLY 3 recommendations "
        "formatted as specified in the output requirements):"
    ]

    for sup in selected:
        lines.append(f"- Product Name: {sup.name}")
        lines.append(f"  Description: {sup.description}")
        lines.append(f"  URL: {sup.url}")
        lines.append(f"  Relevant Goals: {', '.join(sup.goals) if sup.goals else 'General Use'}")
        lines.append(f"  Keywords: {', '.join(sup.benefits_keywords) if sup.benefits_keywords else 'N/A'}")
        lines.append(f"  Suggested Timing: {sup.timing or REFER_TO_PACKAGING}")
        lines.append(f"  Suggested Dosage: {sup.dosage_note or REFER_TO_PACKAGING}")
        lines.append("")

    lines.append(
        "Remember to explain the benefits specifically for the user's goal and selected "
        "sub-focus, and format the output exactly as requested "
        f"({SUPPLEMENT_SECTION_MARKER} block with ### for each product)."
    )
    return "\n".join(lines)


def build_prompt(user_input: UserInput, supplement_section: str) -> str:
    """
    Build the full plan prompt.

    Every profile field is embedded; missing ones read "Not specified".
    Optional components are included only for the flags the user set.
    """
    sub_focus = user_input.display("subFocus")
    frequency = user_input.frequency or "default"

    optional_lines = [
        text for flag, text in OPTIONAL_COMPONENTS if getattr(user_input, flag)
    ]
    optional_block = "\n".join(optional_lines)
    if optional_block:
        optional_block += "\n"

    return f"""User Profile:
- Fitness Goal: {_humanize(user_input.goal)}
- Experience Level: {user_input.display("experience")}
- Equipment Access: {_humanize(user_input.equipment)}
- Training Frequency: {user_input.display("frequency")} days per week
- Preferred Workout Duration: {user_input.display("duration")} minutes per session
- Focus Area: {user_input.display("focusArea")}
- Sub-Focus: {sub_focus}

Plan Requirements:
- Create a {frequency}-day weekly workout schedule tailored to the user's inputs.
- Each day must have a complete, distinct workout that primarily targets the selected sub-focus ({sub_focus}). If no sub-focus is selected, create a balanced plan for the overall goal.
- Detail specific exercises for each training day. **IMPORTANT: Format EACH exercise EXACTLY like this example, using bullet points (•) for details:**
  ### EXERCISE NAME
  • Sets: [Number or Range, e.g., 3-4]
  • Reps/Time: [Number or Range, e.g., 8-12 reps or 30 seconds]
  • Rest: [Duration, e.g., 60-90 seconds]
  • Form Guidance: [Detailed guidance on proper execution, key points, and common mistakes to avoid.]
- Ensure rest periods are scientifically appropriate for the goal and exercise type.
- Provide concise, accurate form guidance within the specified "Form Guidance" field for key exercises to ensure safety and effectiveness.
- Maintain an authoritative, encouraging, and professional tone throughout. Focus on actionable advice and clear rationale grounded in exercise science.
- Ensure the plan is strictly based on established exercise science principles and aligns with the user's stated goal, experience level, and available equipment.
- Format ALL major headings (like DAY 1, NUTRITION GUIDELINES, etc.) in ALL CAPS. Use # for day headings, ## for section headings and ### for subsections.
- Organize information in clearly defined, visually distinct blocks with adequate spacing. Use bold text for important terms. Present lists using bullet points (•).
- Make the content compact yet highly readable with a clean visual hierarchy, suitable for easy scanning and printing.
- Label each day clearly (DAY 1, DAY 2, etc.) with precise workouts for each day.

Optional Components to Include:
{optional_block}- Conclude with a concise, professional summary emphasizing adherence, progressive overload (if applicable), and the importance of monitoring progress.

Additional Requirements:
- Ensure each generated workout plan is unique and scientifically valid, with varied exercises, structures, and approaches compared to previous generations for similar inputs.
- All information must be biologically correct and based on current exercise science. Avoid fitness myths.
- Include specific mechanism explanations for why certain exercises or techniques are recommended for the user's goal and sub-focus.
- Incorporate the HTC Supplements branding theme subtly, perhaps with references to "The Chamber" or high intensity.
- Include the motivational phrase: "{MOTIVATIONAL_PHRASE}" exactly once, perhaps near the end.
- Format the output with consistent visual blocks and clear visual separation between sections as specified.
- Prioritize exercises and programming that specifically target the selected sub-focus ({sub_focus}). Ensure the daily workouts reflect this emphasis.
- Recommend exactly 3 HTC supplements using the details provided below. Format the recommendations precisely as requested in the output requirements.

{supplement_section}

Output Formatting Reminder:
- Day headings (like # DAY 1): ALL CAPS
- Section headings (like ## WORKOUT DETAILS): Left-aligned
- Subsection headings (like ### Exercise Name): Left-aligned
- Use bold for emphasis (**Important Term**) on its own line.
- Use bullet points (•) for lists.
- Ensure clear visual separation between days, exercises, and sections.
- The supplement block must start with {SUPPLEMENT_SECTION_MARKER} and use ### for each product name.
"""
