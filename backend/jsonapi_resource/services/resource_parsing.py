"""Resource Parsing — builds Resource models from client payloads and adapter data.

Invariants:
    - Client payload failures are 400-level (InvalidResourceDocumentError, ResourceValidationError)
    - Adapter data failures are re-raised as ResourceInvariantError (500-level)
    - Relationship data that was not sent stays unspecified; null stays an empty to-one

Design Decisions:
    - Two-step parse: pydantic checks the wire shape, then the Resource setters check
      naming rules (ADR: one source of truth for resource invariants)
    - Maybe threads relationship data so "not sent" and null never collapse
"""

import logging
from typing import Any

from pydantic import ValidationError

from jsonapi_resource.core.errors import (
    ErrorContext, InvalidRelationshipError, InvalidResourceDocumentError,
    ResourceInvariantError, ResourceValidationError,
)
from jsonapi_resource.core.maybe import NOTHING, maybe
from jsonapi_resource.core.relationship import (
    Relationship, RelationshipOwner, ResourceIdentifier,
)
from jsonapi_resource.core.resource import Resource
from jsonapi_resource.infrastructure.observability import error_log_extra
from jsonapi_resource.schemas.resource import (
    RelationshipObject, ResourceIdentifierObject, ResourceObject,
)

logger = logging.getLogger(__name__)


def parse_resource_object(payload: Any) -> Resource:
    """Turn a client-sent resource object into a validated Resource."""
    try:
        resource_object = ResourceObject.model_validate(payload)
    except ValidationError as e:
        details = _validation_details(e)
        logger.warning(
            f"Invalid resource object: {len(details)} problem(s)",
            extra={"error_code": "INVALID_RESOURCE_OBJECT"},
        )
        raise InvalidResourceDocumentError(details) from e

    resource = Resource(
        resource_object.type,
        resource_object.id,
        resource_object.attributes,
        meta=resource_object.meta,
    )
    resource.relationships = {
        path: _relationship_from_schema(resource, path, relationship)
        for path, relationship in resource_object.relationships.items()
    }
    logger.debug(
        "Parsed resource object",
        extra={"resource_type": resource.type, "resource_id": resource.id},
    )
    return resource


def load_adapter_resource(
    type: str,
    id: Any = None,
    attrs: dict[str, Any] | None = None,
    relationships: dict[str, Any] | None = None,
    meta: dict[str, Any] | None = None,
    type_path: list[str] | None = None,
    adapter_extra: Any = None,
) -> Resource:
    """Build a Resource from data a persistence adapter looked up.

    `relationships` maps field paths to linkage data; each becomes a
    Relationship owned by the new resource. An invalid result here is a
    server defect, not bad client input.
    """
    try:
        resource = Resource(type, id, attrs, meta=meta)
        for path, data in (relationships or {}).items():
            resource.set_relationship(path, data)
    except ResourceValidationError as e:
        logger.error(
            f"Adapter produced an invalid resource: {e.message}",
            extra=error_log_extra(e, field=e.field),
        )
        raise e.as_internal_error() from e
    except InvalidRelationshipError as e:
        logger.error(
            f"Adapter produced invalid relationship data: {e.message}",
            extra=error_log_extra(e, resource_type=type, field=e.path),
        )
        raise ResourceInvariantError(
            f"Invalid relationship produced internally: {e.message}",
            context=ErrorContext(resource_type=str(type), field=e.path),
        ) from e

    resource.type_path = type_path
    resource.adapter_extra = adapter_extra
    return resource


def _relationship_from_schema(
    resource: Resource, path: str, relationship: RelationshipObject,
) -> Relationship:
    data = maybe(relationship.data if relationship.has_data else NOTHING).map(_linkage_from_schema)
    return Relationship.of(
        data=data.get_or_default(),
        owner=RelationshipOwner(type=resource.type, id=resource.id, path=path),
        links=relationship.links,
        meta=relationship.meta,
    )


def _linkage_from_schema(
    data: ResourceIdentifierObject | list[ResourceIdentifierObject] | None,
) -> ResourceIdentifier | list[ResourceIdentifier] | None:
    if data is None:
        return None
    if isinstance(data, list):
        return [_identifier_from_schema(item) for item in data]
    return _identifier_from_schema(data)


def _identifier_from_schema(identifier: ResourceIdentifierObject) -> ResourceIdentifier:
    return ResourceIdentifier(identifier.type, identifier.id, dict(identifier.meta))


def _validation_details(exc: ValidationError) -> list[dict[str, Any]]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
