"""Slack Block Kit rendering of SNS notification messages.

Renderers are pure: they read a `Message` and return new block dictionaries,
ready to be sent as the `blocks` field of an incoming webhook payload.
"""

from json import dumps
from typing import Any, Callable

from exceptions import MalformedMessageError
from models import Message

FAILURE_PREFIX = "✗"
RICH_HEADER_TEXT = f"{FAILURE_PREFIX} Build Failed"
VIEWED_LABEL = "Viewed"

Block = dict[str, Any]
Renderer = Callable[[Message], list[Block]]


def plain_text(text: str) -> dict[str, Any]:
    return {"type": "plain_text", "text": text, "emoji": True}


def mrkdwn(text: str) -> dict[str, str]:
    return {"type": "mrkdwn", "text": text}


def format_value(value: Any) -> str:
    """Render a detail value the way it appears in the JSON message."""
    if isinstance(value, str):
        return value
    return dumps(value, ensure_ascii=False)


def format_list(heading: str, items: list[str]) -> str:
    return f"*{heading}*:\n" + "".join(f"{item}\n" for item in items)


def render_simple(message: Message) -> list[Block]:
    """Render a single context line naming the first affected resource."""
    if not message.resources:
        raise MalformedMessageError("Message has no resources to report")

    return [
        {
            "type": "context",
            "elements": [plain_text(f"{FAILURE_PREFIX} {message.resources[0]}")],
        }
    ]


def render_rich(message: Message) -> list[Block]:
    """Render header, details, resources, failed actions and a 'Viewed' checkbox."""
    blocks = [
        {"type": "header", "text": plain_text(RICH_HEADER_TEXT)},
        {
            "type": "section",
            "fields": [
                mrkdwn(f"*{key}:*\n{format_value(value)}")
                for key, value in message.detail.items()
            ],
        },
        {
            "type": "context",
            "elements": [mrkdwn(format_list("resources", message.resources))],
        },
    ]

    if failed_actions := message.additionalAttributes.failedActions:
        blocks.append(
            {
                "type": "context",
                "elements": [
                    mrkdwn(
                        format_list(
                            "failedActions",
                            [action.additionalInformation for action in failed_actions],
                        )
                    )
                ],
            }
        )

    blocks.append(
        {
            "type": "input",
            "element": {
                "type": "checkboxes",
                "options": [{"text": plain_text(f"*{VIEWED_LABEL}*"), "value": "value-0"}],
            },
            "label": plain_text(VIEWED_LABEL),
        }
    )

    return blocks


RENDERERS: dict[str, Renderer] = {
    "simple": render_simple,
    "rich": render_rich,
}
