"""Builders for links that point back into the web application."""
from __future__ import annotations

from typing import Optional

from server_helpers.config import settings


def maybe_set_sub_path(path: str) -> str:
    """Prefix ``path`` with ``SUB_PATH`` when the app is not served from ``/``."""

    url_prefix = settings.SUB_PATH
    if not url_prefix:
        return path

    return url_prefix + path.lstrip("/")


def _base_url() -> str:
    return f"{settings.APP_HOST or ''}{settings.SUB_PATH or '/'}"


def generate_invite_url(
    invitation_token: str,
    organization_token: Optional[str] = None,
    organization_id: Optional[str] = None,
    source: Optional[str] = None,
) -> str:
    url = f"{_base_url()}invitations/{invitation_token}"
    if organization_token:
        url += f"/workspaces/{organization_token}"
        if organization_id:
            url += f"?oid={organization_id}"
    if source:
        url += f"{'&' if organization_id else '?'}source={source}"
    return url


def generate_org_invite_url(organization_token: str, organization_id: Optional[str] = None) -> str:
    url = f"{_base_url()}organization-invitations/{organization_token}"
    if organization_id:
        url += f"?oid={organization_id}"
    return url
