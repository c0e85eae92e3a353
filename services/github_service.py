import logging

import httpx

from core.config import settings
from core.errors import PermissionQueryFailed
from core.permissions import RepoPermission

logger = logging.getLogger("command_bot.github_service")


def _headers() -> dict:
    return {
        "Authorization": f"Bearer {settings.GITHUB_TOKEN}",
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": "2022-11-28",
    }


async def get_user_permission(repo_full_name: str, username: str) -> RepoPermission:
    """Get the permission level a user holds on a repository."""
    url = f"{settings.GITHUB_API_URL}/repos/{repo_full_name}/collaborators/{username}/permission"
    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(url, headers=_headers(), timeout=settings.REQUEST_TIMEOUT)
            response.raise_for_status()
            level = RepoPermission.from_api(response.json())
        except httpx.HTTPError as e:
            raise PermissionQueryFailed(username, str(e)) from e
        except ValueError as e:
            raise PermissionQueryFailed(username, f"unexpected response: {e}") from e

    logger.debug(f"{username} has {level.name} permission on {repo_full_name}")
    return level


async def add_reaction(repo_full_name: str, comment_id: int, content: str, kind: str = "issues"):
    """React to an issue comment (kind="issues") or a review comment (kind="pulls")."""
    url = f"{settings.GITHUB_API_URL}/repos/{repo_full_name}/{kind}/comments/{comment_id}/reactions"
    async with httpx.AsyncClient() as client:
        response = await client.post(url, headers=_headers(), json={"content": content}, timeout=settings.REQUEST_TIMEOUT)
        response.raise_for_status()
