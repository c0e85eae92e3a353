import pytest
import httpx
from unittest.mock import AsyncMock, MagicMock, patch

from core.errors import PermissionQueryFailed
from core.permissions import RepoPermission
from services.github_service import add_reaction, get_user_permission

def mock_response(status_code=200, json_data=None, error=None):
    response = MagicMock(status_code=status_code)
    response.json.return_value = json_data
    if error:
        response.raise_for_status.side_effect = error
    return response

@pytest.mark.asyncio
async def test_get_user_permission_success():
    with patch("httpx.AsyncClient") as MockAsyncClient:
        mock_client_instance = MockAsyncClient.return_value.__aenter__.return_value
        mock_client_instance.get = AsyncMock(return_value=mock_response(json_data={"permission": "write", "role_name": "maintain"}))

        level = await get_user_permission("owner/repo", "alice")

        assert level == RepoPermission.MAINTAIN
        mock_client_instance.get.assert_called_once()
        args, kwargs = mock_client_instance.get.call_args
        assert args[0].endswith("/repos/owner/repo/collaborators/alice/permission")
        assert kwargs["headers"]["Authorization"].startswith("Bearer ")

@pytest.mark.asyncio
async def test_get_user_permission_http_error():
    error = httpx.HTTPStatusError("Not Found", request=httpx.Request("GET", "url"), response=httpx.Response(404))
    with patch("httpx.AsyncClient") as MockAsyncClient:
        mock_client_instance = MockAsyncClient.return_value.__aenter__.return_value
        mock_client_instance.get = AsyncMock(return_value=mock_response(status_code=404, error=error))

        with pytest.raises(PermissionQueryFailed) as exc_info:
            await get_user_permission("owner/repo", "alice")

        assert exc_info.value.actor == "alice"
        assert exc_info.value.__cause__ is error

@pytest.mark.asyncio
async def test_get_user_permission_transport_error():
    with patch("httpx.AsyncClient") as MockAsyncClient:
        mock_client_instance = MockAsyncClient.return_value.__aenter__.return_value
        mock_client_instance.get = AsyncMock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(PermissionQueryFailed):
            await get_user_permission("owner/repo", "alice")

@pytest.mark.asyncio
async def test_get_user_permission_unexpected_body():
    with patch("httpx.AsyncClient") as MockAsyncClient:
        mock_client_instance = MockAsyncClient.return_value.__aenter__.return_value
        mock_client_instance.get = AsyncMock(return_value=mock_response(json_data={"message": "weird"}))

        with pytest.raises(PermissionQueryFailed):
            await get_user_permission("owner/repo", "alice")

@pytest.mark.asyncio
async def test_add_reaction_success():
    with patch("httpx.AsyncClient") as MockAsyncClient:
        mock_client_instance = MockAsyncClient.return_value.__aenter__.return_value
        mock_client_instance.post = AsyncMock(return_value=mock_response(status_code=201))

        await add_reaction("owner/repo", 42, "eyes", kind="pulls")

        mock_client_instance.post.assert_called_once()
        args, kwargs = mock_client_instance.post.call_args
        assert args[0].endswith("/repos/owner/repo/pulls/comments/42/reactions")
        assert kwargs["json"] == {"content": "eyes"}
