"""adapters/btpcli/accounts: fachadas de cuentas"""

from __future__ import annotations

import json

import httpx
import pytest

from adapters.btpcli.accounts import (
    DirectoryCreateInput,
    DirectoryEnableInput,
    SubaccountCreateInput,
)
from core.domain.protocol import HEADER_CLI_BACKEND_MEDIA_TYPE, HEADER_CLI_BACKEND_STATUS
from core.errors import BackendError


def _backend_response(backend_status: int, body: dict) -> httpx.Response:
    return httpx.Response(
        200,
        content=json.dumps(body).encode(),
        headers={HEADER_CLI_BACKEND_STATUS: str(backend_status), HEADER_CLI_BACKEND_MEDIA_TYPE: "application/json"},
    )


def _action(request: httpx.Request) -> str:
    return request.url.query.decode()


class TestSubaccount:
    def test_get(self, backend, facade):
        backend.respond(json_body={"guid": "sa-1", "displayName": "Dev", "subdomain": "dev"})

        subaccount, res = facade.accounts.subaccount.get("sa-1")

        assert subaccount.guid == "sa-1"
        assert subaccount.display_name == "Dev"
        assert res.status_code == 200
        assert _action(backend.last_request) == "get"
        assert backend.last_params() == {"globalAccount": "my-ga", "subaccount": "sa-1"}

    def test_list_with_labels_filter(self, backend, facade):
        backend.respond(json_body={"value": []})

        facade.accounts.subaccount.list("env=prod")

        assert backend.last_params() == {"globalAccount": "my-ga", "labelsFilter": "env=prod"}

    def test_create_fills_global_account(self, backend, facade):
        backend.respond(json_body={"guid": "sa-2"}, backend_status=201)

        subaccount, res = facade.accounts.subaccount.create(
            SubaccountCreateInput(
                display_name="Dev",
                region="eu10",
                subdomain="dev-sub",
                labels={"team": ["a", "b"]},
            )
        )

        assert subaccount.guid == "sa-2"
        assert res.status_code == 201
        assert backend.last_params() == {
            "displayName": "Dev",
            "region": "eu10",
            "subdomain": "dev-sub",
            "betaEnabled": "false",
            "labels": '{"team":["a","b"]}',
            "globalAccount": "my-ga",
        }

    def test_delete_retries_without_force_when_rejected(self, backend, facade):
        responses = iter(
            [
                _backend_response(
                    400,
                    {
                        "error": "Subaccount cannot be deleted with forceDelete=true due to the global account settings"
                    },
                ),
                _backend_response(200, {"guid": "sa-1", "state": "DELETING"}),
            ]
        )
        backend.handle(lambda _request: next(responses))

        subaccount, _ = facade.accounts.subaccount.delete("sa-1")

        assert subaccount.state == "DELETING"
        assert len(backend.requests) == 2
        first, second = (json.loads(r.content)["paramValues"] for r in backend.requests)
        assert first["forceDelete"] == "true"
        assert second["forceDelete"] == "false"
        assert second["confirm"] == "true"

    def test_delete_propagates_other_errors(self, backend, facade):
        backend.respond(json_body={"error": "Subaccount not found"}, backend_status=404)

        with pytest.raises(BackendError, match="Subaccount not found"):
            facade.accounts.subaccount.delete("sa-1")

        assert len(backend.requests) == 1

    def test_subscribe_omits_default_parameters(self, backend, facade):
        backend.respond(json_body={"state": "IN_PROCESS"}, backend_status=202)

        facade.accounts.subaccount.subscribe("sa-1", "auditlog-viewer", "free")

        assert _action(backend.last_request) == "subscribe"
        assert backend.last_params() == {"subaccount": "sa-1", "appName": "auditlog-viewer", "planName": "free"}


class TestDirectory:
    def test_create_with_features(self, backend, facade):
        backend.respond(json_body={"guid": "dir-1"})

        facade.accounts.directory.create(
            DirectoryCreateInput(display_name="Team", features=["DEFAULT", "ENTITLEMENTS"])
        )

        assert backend.last_params() == {
            "displayName": "Team",
            "globalAccount": "my-ga",
            "directoryFeatures": "DEFAULT,ENTITLEMENTS",
        }

    def test_enable(self, backend, facade):
        backend.respond(json_body={"guid": "dir-1"})

        facade.accounts.directory.enable(
            DirectoryEnableInput(directory_id="dir-1", features=["DEFAULT", "AUTHORIZATIONS"], subdomain="team")
        )

        assert _action(backend.last_request) == "enable"
        assert backend.last_params() == {
            "directoryID": "dir-1",
            "directoryFeatures": "DEFAULT,AUTHORIZATIONS",
            "subdomain": "team",
            "globalAccount": "my-ga",
        }

    def test_delete_is_forced(self, backend, facade):
        backend.respond(json_body={"guid": "dir-1"})

        facade.accounts.directory.delete("dir-1")

        assert backend.last_params()["forceDelete"] == "true"
        assert backend.last_params()["confirm"] == "true"


class TestEntitlement:
    _ENTITLEMENTS = {
        "entitledServices": [
            {
                "name": "hana-cloud",
                "servicePlans": [{"name": "hana", "amount": 2}, {"name": "relational-data-lake"}],
            }
        ],
        "assignedServices": [
            {
                "name": "hana-cloud",
                "servicePlans": [
                    {
                        "name": "hana",
                        "assignmentInfo": [
                            {"entityId": "other", "entityType": "SUBACCOUNT"},
                            {"entityId": "sa-1", "entityType": "SUBACCOUNT", "amount": 1},
                        ],
                    }
                ],
            }
        ],
    }

    def test_list_filters(self, backend, facade):
        backend.respond(json_body={})
        entitlement = facade.accounts.entitlement

        entitlement.list_by_global_account()
        assert backend.last_params() == {"globalAccount": "my-ga"}

        entitlement.list_by_subaccount("sa-1")
        assert backend.last_params() == {"subaccountFilter": "sa-1"}

        entitlement.list_by_directory("dir-1")
        assert backend.last_params() == {"directory": "dir-1"}

    def test_assign_to_subaccount(self, backend, facade):
        backend.respond(json_body={}, backend_status=202)

        res = facade.accounts.entitlement.assign_to_subaccount("sa-1", "hana-cloud", "hana", 3)

        assert res.status_code == 202
        assert _action(backend.last_request) == "assign"
        assert backend.last_params() == {
            "subaccount": "sa-1",
            "serviceName": "hana-cloud",
            "servicePlanName": "hana",
            "amount": "3",
        }

    def test_enable_and_disable_in_subaccount(self, backend, facade):
        backend.respond(json_body={})

        facade.accounts.entitlement.enable_in_subaccount("sa-1", "alert-notification", "standard")
        assert backend.last_params()["enable"] == "true"

        facade.accounts.entitlement.disable_in_subaccount("sa-1", "alert-notification", "standard")
        assert backend.last_params()["enable"] == "false"

    def test_assign_to_directory(self, backend, facade):
        backend.respond(json_body={})

        facade.accounts.entitlement.assign_to_directory("dir-1", "hana-cloud", "hana", 4, True, False, 1)

        assert backend.last_params() == {
            "directory": "dir-1",
            "serviceName": "hana-cloud",
            "servicePlanName": "hana",
            "amount": "4",
            "distribute": "true",
            "autoAssign": "false",
            "autoDistributeAmount": "1",
        }

    def test_get_assigned_by_subaccount(self, backend, facade):
        backend.respond(json_body=self._ENTITLEMENTS)

        found, _ = facade.accounts.entitlement.get_assigned_by_subaccount("sa-1", "hana-cloud", "hana")

        assert found is not None
        assert found.service.name == "hana-cloud"
        assert found.plan.name == "hana"
        assert found.assignment.entity_id == "sa-1"
        assert found.assignment.amount == 1

    def test_get_assigned_by_subaccount_not_found(self, backend, facade):
        backend.respond(json_body=self._ENTITLEMENTS)

        found, res = facade.accounts.entitlement.get_assigned_by_subaccount("sa-1", "hana-cloud", "missing")

        assert found is None
        assert res.status_code == 200

    def test_get_entitled_by_directory(self, backend, facade):
        backend.respond(json_body=self._ENTITLEMENTS)

        found, _ = facade.accounts.entitlement.get_entitled_by_directory("dir-1", "hana-cloud", "hana")

        assert found is not None
        assert found.plan.amount == 2


class TestOthers:
    def test_global_account_with_hierarchy(self, backend, facade):
        backend.respond(json_body={"guid": "ga-guid", "children": []})

        global_account, _ = facade.accounts.global_account.get_with_hierarchy()

        assert global_account.guid == "ga-guid"
        assert backend.last_params() == {"globalAccount": "my-ga", "showHierarchy": "true"}

    def test_label_list_by_subaccount(self, backend, facade):
        backend.respond(json_body={"labels": {"env": ["prod"]}})

        labels, _ = facade.accounts.label.list_by_subaccount("sa-1")

        assert labels.labels == {"env": ["prod"]}
        assert backend.last_params() == {"globalAccount": "my-ga", "subaccountID": "sa-1"}

    def test_environment_instance_delete_confirms(self, backend, facade):
        backend.respond(json_body={"id": "env-1"})

        facade.accounts.environment_instance.delete("sa-1", "env-1")

        assert backend.last_params() == {"subaccount": "sa-1", "environmentID": "env-1", "confirm": "true"}

    def test_empty_body_returns_defaults(self, backend, facade):
        backend.respond(content=b"")

        labels, res = facade.accounts.label.list_by_directory("dir-1")

        assert labels.labels == {}
        assert res.status_code == 200
