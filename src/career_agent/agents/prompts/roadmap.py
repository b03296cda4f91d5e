"""Six-month roadmap prompt, built on top of the last career result."""

from textwrap import dedent

ROADMAP_MONTHS = 6

ROADMAP_PROMPT_TEMPLATE = dedent("""
You are a practical career coach.

Based on the following career recommendations, create a realistic {months}-month roadmap.

Requirements:
- Organize by {month_headings}
- For each month, list 3–5 concrete actions (learning, projects, networking, applications)
- Keep it focused and feasible for a busy student

Career recommendations:
{career}
""")


def build_roadmap_prompt(career_text: str) -> str:
    return ROADMAP_PROMPT_TEMPLATE.format(
        months=ROADMAP_MONTHS,
        month_headings=f"Month 1, Month 2, ..., Month {ROADMAP_MONTHS}",
        career=career_text,
    )
