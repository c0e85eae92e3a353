import logging

from core.errors import EventIgnored, InsufficientPermission, SelfTriggerRejected
from core.models import BotCommand, Webhook
from core.permissions import RepoPermission
from services.github_service import get_user_permission
from utils.command_parser import parse_commands

logger = logging.getLogger("command_bot.command_service")

REQUIRED_PERMISSION = RepoPermission.MAINTAIN


async def extract_commands(webhook: Webhook, bots: list[str]) -> list[BotCommand]:
    """Return the bot commands in a comment once its author is allowed to issue them."""
    # Bots must not trigger each other into a loop
    if webhook.author in bots:
        raise SelfTriggerRejected(webhook.author)

    if webhook.action == "deleted":
        raise EventIgnored(webhook.action)

    level = await get_user_permission(webhook.repository, webhook.author)
    if level < REQUIRED_PERMISSION:
        raise InsufficientPermission(level, webhook.author)

    commands = parse_commands(webhook.comment, bots)
    logger.debug(f"Found {len(commands)} command(s) from {webhook.author} in {webhook.repository}")
    return commands
