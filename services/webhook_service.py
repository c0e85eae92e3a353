import logging

import httpx

from core.config import settings
from core.errors import CommandExtractionError, PermissionQueryFailed
from core.models import BotCommand, Webhook
from services.command_service import extract_commands
from services.github_service import add_reaction

logger = logging.getLogger("command_bot.webhook_service")

# Event type -> API path segment for the comment's reactions
COMMENT_EVENTS = {
    "issue_comment": "issues",
    "pull_request_review_comment": "pulls",
}

async def handle_webhook_event(event_type: str, payload: dict) -> list[BotCommand]:
    logger.info(f"Handling event: {event_type}")

    if event_type not in COMMENT_EVENTS:
        logger.info(f"Ignoring event type: {event_type}")
        return []

    try:
        webhook = Webhook.from_payload(payload)
    except ValueError as e:
        logger.warning(f"Malformed {event_type} payload: {e}")
        return []

    try:
        commands = await extract_commands(webhook, settings.BOT_NAMES)
    except PermissionQueryFailed as e:
        logger.error(f"Rejected comment in {webhook.repository}: {e}", exc_info=True)
        return []
    except CommandExtractionError as e:
        logger.info(f"Rejected comment in {webhook.repository}: {e}")
        return []

    if not commands:
        return []

    for command in commands:
        logger.info(f"Received command for @{command.bot}: '{command.command}' with args: '{command.args}' from {webhook.author}")

    if settings.ACK_REACTION and webhook.comment_id is not None:
        try:
            await add_reaction(webhook.repository, webhook.comment_id, settings.ACK_REACTION, kind=COMMENT_EVENTS[event_type])
        except httpx.HTTPError as e:
            logger.warning(f"Could not acknowledge comment {webhook.comment_id} in {webhook.repository}: {e}")

    return commands
