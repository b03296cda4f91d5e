"""Conversation summary prompt."""

from textwrap import dedent

SUMMARY_PROMPT_TEMPLATE = dedent("""
You are a helpful meeting assistant.

Given the following chat transcript between a user and an AI assistant,
produce a concise summary in bullet points. Focus on:
- main questions or topics
- key answers or decisions
- any follow-up actions

Chat transcript:
{transcript}
""")


def build_summary_prompt(transcript_text: str) -> str:
    return SUMMARY_PROMPT_TEMPLATE.format(transcript=transcript_text)
