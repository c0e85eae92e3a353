from core.permissions import RepoPermission


class CommandExtractionError(Exception):
    """A webhook was refused before its comment was parsed for commands."""


class SelfTriggerRejected(CommandExtractionError):
    def __init__(self, actor: str):
        self.actor = actor
        super().__init__(f"{actor} cannot trigger commands")


class EventIgnored(CommandExtractionError):
    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Ignoring comment event: {action}")


class PermissionQueryFailed(CommandExtractionError):
    def __init__(self, actor: str, reason: str):
        self.actor = actor
        super().__init__(f"Could not look up permissions for {actor}: {reason}")


class InsufficientPermission(CommandExtractionError):
    def __init__(self, level: RepoPermission, actor: str):
        self.level = level
        self.actor = actor
        super().__init__(f"Insufficient permissions: {level.name} ({actor})")
