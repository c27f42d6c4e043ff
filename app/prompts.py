"""
Prompt construction and model output cleanup
"""
import json
import re
from typing import Any, Dict, Optional

from pydantic import ValidationError

from app.errors import ProviderError
from app.pydantic.llm import NextSpeaker

_FENCE_OPEN = re.compile(r"^```[\w+-]*[^\S\n]*\n?")
_FENCE_CLOSE = re.compile(r"\n?[^\S\n]*```$")

INVALID_FORMAT = "Invalid response format from AI"


def build_next_speaker_prompt(chat_dialog: str, participants: Optional[str] = None) -> str:
    lines = [
        "Consider the following chat dialog and decide who will be the next person to respond. "
        "Return the name of who would be most likely to say the next thing and the text of "
        "the possible response from that person.",
        "",
    ]
    if participants:
        lines += [
            f"The participants in this chat are: {participants}",
            "The next person to respond must be one of these participants.",
            "",
        ]
    lines += [
        "Return your response as a JSON object with these keys and no others:",
        '- "nextUser": the username of who should respond next',
        '- "message": the text of their response',
        '- "targetedUser": (optional) the username the response is addressed to, '
        "omit it when the message is for everyone",
        "",
        "Only output the JSON object.",
        "",
        "Chat dialog:",
        chat_dialog,
    ]
    return "\n".join(lines)


def build_cached_page_prompt(url: str, text: Optional[str] = None) -> str:
    context = ""
    if text:
        context = f'\nThe page was reached by following a link with the text "{text}".\n'
    return (
        "Imagine you have no internet connection, but you have the cached version "
        "of any web page on the internet.\n"
        f"\nOutput what you think might be at the following URL at {url} as HTML.\n"
        f"{context}"
        "\nOnly output the HTML and CSS of the page with no images.\n"
        "Do not add any explanation to the result.\n"
        "The result should be able to be rendered in a web browser.\n"
        "Do not add any backticks or HTML head tags."
    )


def strip_code_fences(text: str) -> str:
    """
    Remove a leading ``` or ```json line and a trailing ``` fence.
    Nested fences are peeled until none remain, so stripping an already
    stripped string returns it unchanged.
    """
    cleaned = text.strip()
    while True:
        previous = cleaned
        if cleaned.startswith("```"):
            cleaned = _FENCE_OPEN.sub("", cleaned, count=1)
        if cleaned.endswith("```"):
            cleaned = _FENCE_CLOSE.sub("", cleaned, count=1)
        cleaned = cleaned.strip()
        if cleaned == previous:
            return cleaned


def parse_json_output(text: str) -> Any:
    try:
        return json.loads(strip_code_fences(text))
    except (ValueError, TypeError, RecursionError):
        # JSONDecodeError is a ValueError
        raise ProviderError(INVALID_FORMAT)


def parse_next_speaker(text: str) -> Dict[str, Any]:
    data = parse_json_output(text)
    if not isinstance(data, dict):
        raise ProviderError(INVALID_FORMAT)
    try:
        speaker = NextSpeaker.model_validate(data)
    except ValidationError:
        raise ProviderError(INVALID_FORMAT)
    result = {"nextUser": speaker.nextUser, "message": speaker.message}
    if speaker.targetedUser:
        result["targetedUser"] = speaker.targetedUser
    return result
