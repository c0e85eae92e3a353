import re

from core.models import BotCommand

LINE_BREAK = re.compile(r"\r?\n")


def parse_commands(comment_body: str, bots: list[str]) -> list[BotCommand]:
    """Collect every "@<bot> <command> [args]" line of a comment.

    Results are grouped by bot, in the order the bots are given, then by line
    order within the comment. Lines not addressed to a bot are skipped.
    """
    commands = []
    lines = LINE_BREAK.split(comment_body)
    for bot in bots:
        mention = f"@{bot} "
        for line in lines:
            if not line.startswith(mention):
                continue
            remainder = line[len(mention):]
            # "@bot" must be followed by exactly one space
            if remainder.startswith(" "):
                continue
            command, _, args = remainder.partition(" ")
            commands.append(BotCommand(command=command, args=args, bot=bot))
    return commands
