"""Fachada `security/role-collection`.

Las asignaciones de usuarios y grupos piden siempre `createUserIfMissing`:
el usuario puede no existir todavía en el origin del identity provider.
"""

from __future__ import annotations

from collections.abc import Callable

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.xsuaa_authz import RoleCollection, UserReference
from core.domain.commands import (
    CommandRequest,
    CommandResponse,
    new_assign_request,
    new_create_request,
    new_delete_request,
    new_get_request,
    new_list_request,
    new_unassign_request,
)


class SecurityRoleCollectionFacade(CommandFacade):
    command = "security/role-collection"

    def _ga_scope(self) -> dict[str, str]:
        return {"globalAccount": self._global_account()}

    def _list(self, scope: dict[str, str]) -> tuple[list[RoleCollection], CommandResponse]:
        return self._execute(list[RoleCollection], new_list_request(self.command, scope))

    def _single(
        self, build: Callable[..., CommandRequest], scope: dict[str, str], name: str, **extra: str
    ) -> tuple[RoleCollection, CommandResponse]:
        params = {**scope, "roleCollectionName": name, **extra}
        return self._execute(RoleCollection, build(self.command, params))

    def _assign(
        self, scope: dict[str, str], name: str, member_key: str, member: str, origin: str
    ) -> tuple[UserReference, CommandResponse]:
        params = {
            **scope,
            "roleCollectionName": name,
            member_key: member,
            "origin": origin,
            "createUserIfMissing": "true",
        }
        return self._execute(UserReference, new_assign_request(self.command, params))

    def _unassign(
        self, scope: dict[str, str], name: str, member_key: str, member: str, origin: str
    ) -> tuple[UserReference, CommandResponse]:
        params = {
            **scope,
            "roleCollectionName": name,
            member_key: member,
            "origin": origin,
        }
        return self._execute(UserReference, new_unassign_request(self.command, params))

    # Global account

    def list_by_global_account(self) -> tuple[list[RoleCollection], CommandResponse]:
        return self._list(self._ga_scope())

    def get_by_global_account(self, name: str) -> tuple[RoleCollection, CommandResponse]:
        return self._single(new_get_request, self._ga_scope(), name)

    def create_by_global_account(self, name: str, description: str) -> tuple[RoleCollection, CommandResponse]:
        return self._single(new_create_request, self._ga_scope(), name, description=description)

    def delete_by_global_account(self, name: str) -> tuple[RoleCollection, CommandResponse]:
        return self._single(new_delete_request, self._ga_scope(), name)

    def assign_user_by_global_account(
        self, name: str, username: str, origin: str
    ) -> tuple[UserReference, CommandResponse]:
        return self._assign(self._ga_scope(), name, "userName", username, origin)

    def unassign_user_by_global_account(
        self, name: str, username: str, origin: str
    ) -> tuple[UserReference, CommandResponse]:
        return self._unassign(self._ga_scope(), name, "userName", username, origin)

    def assign_group_by_global_account(
        self, name: str, group: str, origin: str
    ) -> tuple[UserReference, CommandResponse]:
        return self._assign(self._ga_scope(), name, "group", group, origin)

    def unassign_group_by_global_account(
        self, name: str, group: str, origin: str
    ) -> tuple[UserReference, CommandResponse]:
        return self._unassign(self._ga_scope(), name, "group", group, origin)

    # Subaccount

    def list_by_subaccount(self, subaccount_id: str) -> tuple[list[RoleCollection], CommandResponse]:
        return self._list({"subaccount": subaccount_id})

    def get_by_subaccount(self, subaccount_id: str, name: str) -> tuple[RoleCollection, CommandResponse]:
        return self._single(new_get_request, {"subaccount": subaccount_id}, name)

    def create_by_subaccount(
        self, subaccount_id: str, name: str, description: str
    ) -> tuple[RoleCollection, CommandResponse]:
        return self._single(new_create_request, {"subaccount": subaccount_id}, name, description=description)

    def delete_by_subaccount(self, subaccount_id: str, name: str) -> tuple[RoleCollection, CommandResponse]:
        return self._single(new_delete_request, {"subaccount": subaccount_id}, name)

    def assign_user_by_subaccount(
        self, subaccount_id: str, name: str, username: str, origin: str
    ) -> tuple[UserReference, CommandResponse]:
        return self._assign({"subaccount": subaccount_id}, name, "userName", username, origin)

    def unassign_user_by_subaccount(
        self, subaccount_id: str, name: str, username: str, origin: str
    ) -> tuple[UserReference, CommandResponse]:
        return self._unassign({"subaccount": subaccount_id}, name, "userName", username, origin)

    def assign_group_by_subaccount(
        self, subaccount_id: str, name: str, group: str, origin: str
    ) -> tuple[UserReference, CommandResponse]:
        return self._assign({"subaccount": subaccount_id}, name, "group", group, origin)

    def unassign_group_by_subaccount(
        self, subaccount_id: str, name: str, group: str, origin: str
    ) -> tuple[UserReference, CommandResponse]:
        return self._unassign({"subaccount": subaccount_id}, name, "group", group, origin)

    # Directory

    def list_by_directory(self, directory_id: str) -> tuple[list[RoleCollection], CommandResponse]:
        return self._list({"directory": directory_id})

    def get_by_directory(self, directory_id: str, name: str) -> tuple[RoleCollection, CommandResponse]:
        return self._single(new_get_request, {"directory": directory_id}, name)

    def create_by_directory(
        self, directory_id: str, name: str, description: str
    ) -> tuple[RoleCollection, CommandResponse]:
        return self._single(new_create_request, {"directory": directory_id}, name, description=description)

    def delete_by_directory(self, directory_id: str, name: str) -> tuple[RoleCollection, CommandResponse]:
        return self._single(new_delete_request, {"directory": directory_id}, name)

    def assign_user_by_directory(
        self, directory_id: str, name: str, username: str, origin: str
    ) -> tuple[UserReference, CommandResponse]:
        return self._assign({"directory": directory_id}, name, "userName", username, origin)

    def unassign_user_by_directory(
        self, directory_id: str, name: str, username: str, origin: str
    ) -> tuple[UserReference, CommandResponse]:
        return self._unassign({"directory": directory_id}, name, "userName", username, origin)

    def assign_group_by_directory(
        self, directory_id: str, name: str, group: str, origin: str
    ) -> tuple[UserReference, CommandResponse]:
        return self._assign({"directory": directory_id}, name, "group", group, origin)

    def unassign_group_by_directory(
        self, directory_id: str, name: str, group: str, origin: str
    ) -> tuple[UserReference, CommandResponse]:
        return self._unassign({"directory": directory_id}, name, "group", group, origin)
