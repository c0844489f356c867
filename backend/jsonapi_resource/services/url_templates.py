"""URL Templates — default link templates for resources and their relationships.

Invariants:
    - `self` renders from resource data (type, id); relationship templates render from owner data
    - Path segments are percent-encoded
    - A resource without an id links to its collection
    - Relationship templates render nothing for an owner without an id

Design Decisions:
    - Callables over RFC 6570 strings: Resource.to_json already accepts either, and
      callables need no template engine
    - Root URL built from Settings so deployments change links via environment only
"""

from typing import Any
from urllib.parse import quote

from jsonapi_resource.config import Settings, get_settings
from jsonapi_resource.core.domain_types import TemplateName, UrlTemplates


def default_url_templates(base_url: str, api_prefix: str = "") -> UrlTemplates:
    """Templates following /{type}/{id}, /{type}/{id}/relationships/{path}, /{type}/{id}/{path}."""
    root = f"{base_url.rstrip('/')}{api_prefix}"

    def self_link(data: dict[str, Any]) -> str:
        url = f"{root}/{_segment(data['type'])}"
        if data.get("id") is not None:
            url += f"/{_segment(data['id'])}"
        return url

    def relationship_link(owner: dict[str, Any]) -> str | None:
        if owner.get("owner_id") is None:
            return None
        return f"{_owner_url(root, owner)}/relationships/{_segment(owner['path'])}"

    def related_link(owner: dict[str, Any]) -> str | None:
        if owner.get("owner_id") is None:
            return None
        return f"{_owner_url(root, owner)}/{_segment(owner['path'])}"

    return {
        TemplateName.SELF.value: self_link,
        TemplateName.RELATIONSHIP.value: relationship_link,
        TemplateName.RELATED.value: related_link,
    }


def url_templates_from_settings(settings: Settings | None = None) -> UrlTemplates:
    settings = settings or get_settings()
    return default_url_templates(settings.base_url, settings.api_prefix)


def _owner_url(root: str, owner: dict[str, Any]) -> str:
    return f"{root}/{_segment(owner['owner_type'])}/{_segment(owner['owner_id'])}"


def _segment(value: Any) -> str:
    return quote(str(value), safe="")
