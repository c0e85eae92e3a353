import hashlib
import hmac

from fastapi import Request, HTTPException, status

from core.config import settings

SIGNATURE_HEADER = "X-Hub-Signature-256"


def compute_signature(secret: str, body: bytes) -> str:
    digest = hmac.new(secret.encode("utf-8"), msg=body, digestmod=hashlib.sha256).hexdigest()
    return f"sha256={digest}"


def verify_github_signature(request: Request, body: bytes):
    """Reject webhook deliveries not signed with the configured secret."""
    signature_header = request.headers.get(SIGNATURE_HEADER)
    if not signature_header:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"{SIGNATURE_HEADER} header is missing!"
        )

    expected_signature = compute_signature(settings.GITHUB_WEBHOOK_SECRET, body)
    if not hmac.compare_digest(expected_signature, signature_header):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Request signature does not match!"
        )
