"""Permission operations: check, write, delete, read, expand, list objects."""

from urllib.parse import quote

from anamericano_client.auth.authenticators import Authenticator
from anamericano_client.auth.context import RequestContext
from anamericano_client.client import BaseClient
from anamericano_client.models import (
    ListObjectsRequest,
    Permission,
    PermissionCheckRequest,
    PermissionCheckResponse,
    PermissionDeleteRequest,
    PermissionExpandRequest,
    PermissionReadRequest,
    PermissionWriteRequest,
    string_list_from_json,
)

API_PREFIX = "/api/permissions"


def _path(*segments: str) -> str:
    return API_PREFIX + "".join(f"/{quote(segment, safe='')}" for segment in segments)


class PermissionClient(BaseClient):
    """Client for the An-Americano permission API.

    Every operation validates its input before any network I/O and accepts
    keyword-only ``context`` and ``auth`` for per-call credentials.

    Example:
        ```python
        async with PermissionClient(BearerTokenAuth("token")) as client:
            resp = await client.check_permission(
                PermissionCheckRequest(
                    subject_type="user",
                    subject_id="hanul",
                    relation="viewer",
                    object_namespace="document",
                    object_id="doc1",
                )
            )
            if resp.allowed:
                ...
        ```
    """

    async def check_permission(
        self,
        request: PermissionCheckRequest,
        *,
        context: RequestContext | None = None,
        auth: Authenticator | None = None,
    ) -> PermissionCheckResponse:
        """Check whether a subject holds a relation on an object."""
        request.validate()
        result = await self.request(
            "POST",
            _path("check"),
            body=request,
            decode=PermissionCheckResponse.from_dict,
            context=context,
            auth=auth,
        )
        return result if result is not None else PermissionCheckResponse()

    async def write_permission(
        self,
        request: PermissionWriteRequest,
        *,
        context: RequestContext | None = None,
        auth: Authenticator | None = None,
    ) -> Permission:
        """Create a permission tuple and return it as stored by the service."""
        request.validate()
        result = await self.request(
            "POST",
            _path("write"),
            body=request,
            decode=Permission.from_dict,
            context=context,
            auth=auth,
        )
        return result if result is not None else Permission()

    async def delete_permission(
        self,
        request: PermissionDeleteRequest,
        *,
        context: RequestContext | None = None,
        auth: Authenticator | None = None,
    ) -> None:
        """Remove a permission tuple."""
        request.validate()
        await self.request("DELETE", _path("delete"), body=request, context=context, auth=auth)

    async def read_permissions(
        self,
        namespace: str,
        object_id: str,
        *,
        context: RequestContext | None = None,
        auth: Authenticator | None = None,
    ) -> list[Permission]:
        """Return every permission tuple stored for one object."""
        PermissionReadRequest(object_namespace=namespace, object_id=object_id).validate()
        result = await self.request(
            "GET",
            _path("read", namespace, object_id),
            decode=Permission.list_from_json,
            context=context,
            auth=auth,
        )
        return result or []

    async def expand_permissions(
        self,
        namespace: str,
        object_id: str,
        relation: str,
        *,
        context: RequestContext | None = None,
        auth: Authenticator | None = None,
    ) -> list[str]:
        """Return every subject holding ``relation`` on an object.

        Subjects come back as ``type:id`` or ``type:id#relation``, e.g.
        ``["user:hanul", "group:ana#member"]``.
        """
        PermissionExpandRequest(object_namespace=namespace, object_id=object_id, relation=relation).validate()
        result = await self.request(
            "GET",
            _path("expand", namespace, object_id, relation),
            decode=string_list_from_json,
            context=context,
            auth=auth,
        )
        return result or []

    async def list_objects(
        self,
        subject_type: str,
        subject_id: str,
        relation: str,
        namespace: str,
        *,
        context: RequestContext | None = None,
        auth: Authenticator | None = None,
    ) -> list[str]:
        """Return the IDs of objects in ``namespace`` the subject holds ``relation`` on."""
        ListObjectsRequest(
            subject_type=subject_type,
            subject_id=subject_id,
            relation=relation,
            object_namespace=namespace,
        ).validate()
        result = await self.request(
            "GET",
            _path("list", subject_type, subject_id, relation, namespace),
            decode=string_list_from_json,
            context=context,
            auth=auth,
        )
        return result or []
