import re

_FENCE_PATTERN = re.compile(r"^```[a-zA-Z]*\s*\n?(?P<body>.*?)\n?```$", re.DOTALL)


def extract_json_from_response(response: str) -> str:
    """
    Return the JSON payload of a model reply.

    Schema-constrained replies are normally bare JSON, but a reply wrapped in
    a markdown code fence (```json ... ```) is unwrapped first.

    Args:
        response: Raw reply text

    Returns:
        str: The reply with any surrounding fence and whitespace removed
    """
    text = response.strip()
    fenced = _FENCE_PATTERN.match(text)
    if fenced:
        text = fenced.group("body").strip()
    return text
