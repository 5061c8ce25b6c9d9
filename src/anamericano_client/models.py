"""Permission domain models.

A permission is a tuple ``object#relation@subject``; the subject may itself be
qualified by a relation (``group:team-alpha#member``) for indirect grants.

Wire format is JSON with camelCase keys. Request types validate field
presence with ``validate()``, which raises ``MissingFieldError`` naming the
first missing field.
"""

from dataclasses import dataclass
from typing import Any

from anamericano_client.errors.exceptions import MissingFieldError


def _require(*pairs: tuple[str, str | None]) -> None:
    for wire_name, value in pairs:
        if not value:
            raise MissingFieldError(wire_name)


def _expect_object(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _str_field(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _int_field(data: dict[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise TypeError(f"{key} must be an integer, got {type(value).__name__}")
    return value


@dataclass
class PermissionCheckRequest:
    """Does ``subject`` hold ``relation`` on ``object``?

    Example:
        ```python
        req = PermissionCheckRequest(
            subject_type="user",
            subject_id="hanul",
            relation="viewer",
            object_namespace="document",
            object_id="doc1",
        )
        ```
    """

    subject_type: str = ""
    subject_id: str = ""
    relation: str = ""
    object_namespace: str = ""
    object_id: str = ""

    def validate(self) -> None:
        _require(
            ("subjectType", self.subject_type),
            ("subjectId", self.subject_id),
            ("relation", self.relation),
            ("objectNamespace", self.object_namespace),
            ("objectId", self.object_id),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "subjectType": self.subject_type,
            "subjectId": self.subject_id,
            "relation": self.relation,
            "objectNamespace": self.object_namespace,
            "objectId": self.object_id,
        }


@dataclass
class PermissionCheckResponse:
    allowed: bool = False
    message: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PermissionCheckResponse":
        """Decode a check result.

        Raises:
            TypeError: If ``allowed`` is not a JSON boolean or a field has the wrong type.
        """
        data = _expect_object(data)
        allowed = data.get("allowed")
        if allowed is not None and not isinstance(allowed, bool):
            raise TypeError(f"allowed must be a boolean, got {type(allowed).__name__}")
        return cls(allowed=bool(allowed), message=_str_field(data, "message") or "")


@dataclass
class PermissionWriteRequest:
    """Create a relation between a subject and an object.

    Set ``subject_relation`` for an indirect grant, e.g. every ``member`` of
    ``group:team-alpha`` becomes a ``viewer``.
    """

    object_namespace: str = ""
    object_id: str = ""
    relation: str = ""
    subject_type: str = ""
    subject_id: str = ""
    subject_relation: str | None = None

    def validate(self) -> None:
        _require(
            ("objectNamespace", self.object_namespace),
            ("objectId", self.object_id),
            ("relation", self.relation),
            ("subjectType", self.subject_type),
            ("subjectId", self.subject_id),
        )

    def to_dict(self) -> dict[str, Any]:
        data = {
            "objectNamespace": self.object_namespace,
            "objectId": self.object_id,
            "relation": self.relation,
            "subjectType": self.subject_type,
            "subjectId": self.subject_id,
        }
        if self.subject_relation is not None:
            data["subjectRelation"] = self.subject_relation
        return data


@dataclass
class PermissionDeleteRequest:
    """Remove an existing relation."""

    object_namespace: str = ""
    object_id: str = ""
    relation: str = ""
    subject_type: str = ""
    subject_id: str = ""

    def validate(self) -> None:
        _require(
            ("objectNamespace", self.object_namespace),
            ("objectId", self.object_id),
            ("relation", self.relation),
            ("subjectType", self.subject_type),
            ("subjectId", self.subject_id),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "objectNamespace": self.object_namespace,
            "objectId": self.object_id,
            "relation": self.relation,
            "subjectType": self.subject_type,
            "subjectId": self.subject_id,
        }


@dataclass
class PermissionReadRequest:
    object_namespace: str = ""
    object_id: str = ""

    def validate(self) -> None:
        _require(("objectNamespace", self.object_namespace), ("objectId", self.object_id))


@dataclass
class PermissionExpandRequest:
    object_namespace: str = ""
    object_id: str = ""
    relation: str = ""

    def validate(self) -> None:
        _require(
            ("objectNamespace", self.object_namespace),
            ("objectId", self.object_id),
            ("relation", self.relation),
        )


@dataclass
class ListObjectsRequest:
    subject_type: str = ""
    subject_id: str = ""
    relation: str = ""
    object_namespace: str = ""

    def validate(self) -> None:
        _require(
            ("subjectType", self.subject_type),
            ("subjectId", self.subject_id),
            ("relation", self.relation),
            ("objectNamespace", self.object_namespace),
        )


@dataclass
class Permission:
    """A stored permission tuple."""

    id: int = 0
    object_namespace: str = ""
    object_id: str = ""
    relation: str = ""
    subject_type: str = ""
    subject_id: str = ""
    subject_relation: str | None = None  # Group membership qualifier
    created_at: str = ""

    def __str__(self) -> str:
        text = f"{self.object_namespace}:{self.object_id}#{self.relation}@{self.subject_type}:{self.subject_id}"
        if self.subject_relation is not None:
            text += f"#{self.subject_relation}"
        return text

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Permission":
        data = _expect_object(data)
        return cls(
            id=_int_field(data, "id") or 0,
            object_namespace=_str_field(data, "objectNamespace") or "",
            object_id=_str_field(data, "objectId") or "",
            relation=_str_field(data, "relation") or "",
            subject_type=_str_field(data, "subjectType") or "",
            subject_id=_str_field(data, "subjectId") or "",
            subject_relation=_str_field(data, "subjectRelation"),
            created_at=_str_field(data, "createdAt") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "objectNamespace": self.object_namespace,
            "objectId": self.object_id,
            "relation": self.relation,
            "subjectType": self.subject_type,
            "subjectId": self.subject_id,
        }
        if self.subject_relation is not None:
            data["subjectRelation"] = self.subject_relation
        if self.created_at:
            data["createdAt"] = self.created_at
        return data

    @classmethod
    def list_from_json(cls, data: Any) -> list["Permission"]:
        if not isinstance(data, list):
            raise TypeError(f"expected a list of permissions, got {type(data).__name__}")
        return [cls.from_dict(item) for item in data]


def string_list_from_json(data: Any) -> list[str]:
    """Decode a JSON array of strings (expand and list-objects results)."""
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise TypeError("expected a list of strings")
    return data
