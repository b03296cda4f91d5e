from textwrap import dedent

CHAT_PROMPT_TEMPLATE = dedent("""
You are a friendly but concise career and life advice assistant.
Answer the user's question clearly and helpfully.

User message:
{message}
""")


def build_chat_prompt(user_message: str) -> str:
    return CHAT_PROMPT_TEMPLATE.format(message=user_message)
