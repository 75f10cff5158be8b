"""Fachada `security/role`.

Los roles existen en tres niveles (global account, directory, subaccount);
cada método indica el nivel en su nombre.
"""

from __future__ import annotations

from dataclasses import dataclass

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.xsuaa_authz import Role
from core.domain.commands import (
    CommandResponse,
    new_add_request,
    new_create_request,
    new_delete_request,
    new_get_request,
    new_list_request,
    new_remove_request,
)
from core.tfutils import cli_param, to_btpcli_params_map


@dataclass
class GlobalAccountRoleCreateInput:
    role_name: str = cli_param("roleName")
    app_id: str = cli_param("appId")
    role_template_name: str = cli_param("roleTemplateName")
    description: str = cli_param("description", default="")


@dataclass
class DirectoryRoleCreateInput:
    role_name: str = cli_param("roleName")
    app_id: str = cli_param("appId")
    role_template_name: str = cli_param("roleTemplateName")
    directory_id: str = cli_param("directory")
    description: str = cli_param("description", default="")


@dataclass
class SubaccountRoleCreateInput:
    role_name: str = cli_param("roleName")
    app_id: str = cli_param("appId")
    role_template_name: str = cli_param("roleTemplateName")
    subaccount_id: str = cli_param("subaccount")
    description: str = cli_param("description", default="")
    attribute_list: str = cli_param("attributeList", default="")


def _create_params(args: object, **scope: str) -> dict[str, str]:
    params = to_btpcli_params_map(args)
    params.update(scope)
    # El backend exige la descripción aunque esté vacía.
    params.setdefault("description", "")
    return params


def _role_params(role_name: str, app_id: str, role_template_name: str) -> dict[str, str]:
    return {
        "roleName": role_name,
        "appId": app_id,
        "roleTemplateName": role_template_name,
    }


def _membership_params(
    role_collection: str,
    role_name: str,
    app_id: str,
    role_template_name: str,
) -> dict[str, str]:
    return {
        "roleName": role_name,
        "roleCollectionName": role_collection,
        "roleTemplateAppID": app_id,
        "roleTemplateName": role_template_name,
    }


class SecurityRoleFacade(CommandFacade):
    command = "security/role"

    def list_by_global_account(self) -> tuple[list[Role], CommandResponse]:
        return self._execute(list[Role], new_list_request(self.command, {"globalAccount": self._global_account()}))

    def get_by_global_account(
        self, role_name: str, app_id: str, role_template_name: str
    ) -> tuple[Role, CommandResponse]:
        params = {"globalAccount": self._global_account(), **_role_params(role_name, app_id, role_template_name)}
        return self._execute(Role, new_get_request(self.command, params))

    def create_by_global_account(self, args: GlobalAccountRoleCreateInput) -> tuple[Role, CommandResponse]:
        params = _create_params(args, globalAccount=self._global_account())
        return self._execute(Role, new_create_request(self.command, params))

    def delete_by_global_account(
        self, role_name: str, app_id: str, role_template_name: str
    ) -> tuple[Role, CommandResponse]:
        params = {"globalAccount": self._global_account(), **_role_params(role_name, app_id, role_template_name)}
        return self._execute(Role, new_delete_request(self.command, params))

    def list_by_subaccount(self, subaccount_id: str) -> tuple[list[Role], CommandResponse]:
        return self._execute(list[Role], new_list_request(self.command, {"subaccount": subaccount_id}))

    def get_by_subaccount(
        self, subaccount_id: str, role_name: str, app_id: str, role_template_name: str
    ) -> tuple[Role, CommandResponse]:
        params = {"subaccount": subaccount_id, **_role_params(role_name, app_id, role_template_name)}
        return self._execute(Role, new_get_request(self.command, params))

    def create_by_subaccount(self, args: SubaccountRoleCreateInput) -> tuple[Role, CommandResponse]:
        return self._execute(Role, new_create_request(self.command, _create_params(args)))

    def delete_by_subaccount(
        self, subaccount_id: str, role_name: str, app_id: str, role_template_name: str
    ) -> tuple[Role, CommandResponse]:
        params = {"subaccount": subaccount_id, **_role_params(role_name, app_id, role_template_name)}
        return self._execute(Role, new_delete_request(self.command, params))

    def list_by_directory(self, directory_id: str) -> tuple[list[Role], CommandResponse]:
        return self._execute(list[Role], new_list_request(self.command, {"directory": directory_id}))

    def get_by_directory(
        self, directory_id: str, role_name: str, app_id: str, role_template_name: str
    ) -> tuple[Role, CommandResponse]:
        params = {"directory": directory_id, **_role_params(role_name, app_id, role_template_name)}
        return self._execute(Role, new_get_request(self.command, params))

    def create_by_directory(self, args: DirectoryRoleCreateInput) -> tuple[Role, CommandResponse]:
        return self._execute(Role, new_create_request(self.command, _create_params(args)))

    def delete_by_directory(
        self, directory_id: str, role_name: str, app_id: str, role_template_name: str
    ) -> tuple[Role, CommandResponse]:
        params = {"directory": directory_id, **_role_params(role_name, app_id, role_template_name)}
        return self._execute(Role, new_delete_request(self.command, params))

    # Alta y baja de un rol dentro de una role collection.

    def add_by_global_account(
        self, role_collection: str, role_name: str, app_id: str, role_template_name: str
    ) -> CommandResponse:
        params = {
            "globalAccount": self._global_account(),
            **_membership_params(role_collection, role_name, app_id, role_template_name),
        }
        return self._execute_without_body(new_add_request(self.command, params))

    def add_by_subaccount(
        self, subaccount_id: str, role_collection: str, role_name: str, app_id: str, role_template_name: str
    ) -> CommandResponse:
        params = {
            "subaccount": subaccount_id,
            **_membership_params(role_collection, role_name, app_id, role_template_name),
        }
        return self._execute_without_body(new_add_request(self.command, params))

    def add_by_directory(
        self, directory_id: str, role_collection: str, role_name: str, app_id: str, role_template_name: str
    ) -> CommandResponse:
        params = {
            "directory": directory_id,
            **_membership_params(role_collection, role_name, app_id, role_template_name),
        }
        return self._execute_without_body(new_add_request(self.command, params))

    def remove_by_global_account(
        self, role_collection: str, role_name: str, app_id: str, role_template_name: str
    ) -> CommandResponse:
        params = {
            "globalAccount": self._global_account(),
            **_membership_params(role_collection, role_name, app_id, role_template_name),
        }
        return self._execute_without_body(new_remove_request(self.command, params))

    def remove_by_subaccount(
        self, subaccount_id: str, role_collection: str, role_name: str, app_id: str, role_template_name: str
    ) -> CommandResponse:
        params = {
            "subaccount": subaccount_id,
            **_membership_params(role_collection, role_name, app_id, role_template_name),
        }
        return self._execute_without_body(new_remove_request(self.command, params))

    def remove_by_directory(
        self, directory_id: str, role_collection: str, role_name: str, app_id: str, role_template_name: str
    ) -> CommandResponse:
        params = {
            "directory": directory_id,
            **_membership_params(role_collection, role_name, app_id, role_template_name),
        }
        return self._execute_without_body(new_remove_request(self.command, params))
