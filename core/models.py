from pydantic import BaseModel, ConfigDict


class BotCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    command: str
    args: str
    bot: str


class Webhook(BaseModel):
    """The parts of a comment event needed to extract commands."""

    model_config = ConfigDict(frozen=True)

    author: str
    action: str
    comment: str = ""
    repository: str
    comment_id: int | None = None

    @classmethod
    def from_payload(cls, payload: dict) -> "Webhook":
        """Build from an issue_comment or pull_request_review_comment payload."""
        comment = payload.get("comment") or {}
        sender = payload.get("sender") or comment.get("user") or {}
        repository = payload.get("repository") or {}

        author = sender.get("login")
        action = payload.get("action")
        repo_full_name = repository.get("full_name")
        if not author or not action or not repo_full_name:
            raise ValueError("Comment payload is missing sender, action or repository")

        return cls(
            author=author,
            action=action,
            comment=comment.get("body") or "",
            repository=repo_full_name,
            comment_id=comment.get("id"),
        )
