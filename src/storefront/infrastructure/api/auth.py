"""Bearer-credential resolution.

Token issuance lives outside this service.  The default resolver trusts
the bearer token verbatim as the user ID, as issued by the upstream
gateway; deployments swap it via ``app.dependency_overrides``.
"""

from __future__ import annotations

from fastapi import Header, HTTPException


def current_user_id(authorization: str | None = Header(default=None)) -> str:
    if not authorization:
        raise HTTPException(status_code=401, detail="Access token required")

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(status_code=401, detail="Invalid authorization header")
    return token
