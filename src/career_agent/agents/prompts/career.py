"""Career recommendation prompt."""

from textwrap import dedent

CAREER_PROMPT_TEMPLATE = dedent("""
You are a professional career advisor and mentor.

Analyze the user's profile and provide:
- 3–5 specific career paths that fit them
- 1–2 sentence justification for each path
- key skills required for each path
- optional: typical work settings or industries

User profile:
{profile}
""")


def build_career_prompt(profile_text: str) -> str:
    return CAREER_PROMPT_TEMPLATE.format(profile=profile_text)
