"""adapters/btpcli/services: service manager"""

from __future__ import annotations

import json

import httpx
import pytest

from adapters.btpcli.services import (
    ServiceInstanceCreateInput,
    ServiceInstanceUpdateInput,
    SubaccountServiceBindingCreateInput,
    SubaccountServiceBrokerRegisterInput,
    compute_label_param,
)
from core.domain.protocol import HEADER_CLI_BACKEND_MEDIA_TYPE, HEADER_CLI_BACKEND_STATUS
from core.errors import BackendError


def _response(backend_status: int, body=None) -> httpx.Response:
    content = json.dumps(body).encode() if body is not None else b""
    return httpx.Response(
        200,
        content=content,
        headers={HEADER_CLI_BACKEND_STATUS: str(backend_status), HEADER_CLI_BACKEND_MEDIA_TYPE: "application/json"},
    )


def _params(request: httpx.Request) -> dict[str, str]:
    return json.loads(request.content)["paramValues"]


class TestComputeLabelParam:
    def test_no_changes(self):
        assert compute_label_param({"env": ["dev"]}, {"env": ["dev"]}) == ""
        assert compute_label_param({}, {}) == ""

    def test_changed_values_are_replaced(self):
        ops = json.loads(compute_label_param({"env": ["prod"]}, {"env": ["dev"]}))

        assert ops == [
            {"op": "remove", "key": "env", "values": ["dev"]},
            {"op": "add", "key": "env", "values": ["prod"]},
        ]

    def test_added_and_removed_keys(self):
        ops = json.loads(compute_label_param({"team": ["a"]}, {"owner": ["x"]}))

        assert ops == [
            {"op": "add", "key": "team", "values": ["a"]},
            {"op": "remove", "key": "owner", "values": ["x"]},
        ]


class TestInstance:
    def test_list_filters(self, backend, facade):
        backend.respond(json_body=[{"id": "si-1", "name": "db"}])

        instances, _ = facade.services.instance.list("sa-1", labels_filter="env eq 'prod'")

        assert instances[0].name == "db"
        assert backend.last_params() == {"subaccount": "sa-1", "labelsFilter": "env eq 'prod'"}

    def test_get_by_id_without_parameters(self, backend, facade):
        backend.respond(json_body={"id": "si-1", "service_plan_id": "plan-1", "ready": True})

        instance, _ = facade.services.instance.get_by_id("sa-1", "si-1")

        assert instance.service_plan_id == "plan-1"
        assert instance.ready is True
        assert backend.last_params() == {"subaccount": "sa-1", "id": "si-1", "parameters": "false"}

    def test_create_synchronous(self, backend, facade):
        backend.respond(json_body={"id": "si-1", "name": "db"}, backend_status=201)

        instance, res = facade.services.instance.create(
            ServiceInstanceCreateInput(name="db", subaccount="sa-1", service_plan_id="plan-1")
        )

        assert instance.id == "si-1"
        assert res.status_code == 201
        assert len(backend.requests) == 1
        assert backend.last_params() == {"name": "db", "subaccount": "sa-1", "plan": "plan-1"}

    def test_create_accepted_reads_back_by_name(self, backend, facade):
        responses = iter([_response(202, {}), _response(200, {"id": "si-1", "name": "db", "ready": True})])
        backend.handle(lambda _request: next(responses))

        instance, res = facade.services.instance.create(
            ServiceInstanceCreateInput(
                name="db", subaccount="sa-1", service_plan_id="plan-1", parameters='{"size": 1}'
            )
        )

        assert instance.ready is True
        assert res.status_code == 200
        create, get = backend.requests
        assert _params(create)["parameters"] == '{"size": 1}'
        assert get.url.query == b"get"
        assert _params(get) == {"subaccount": "sa-1", "name": "db", "parameters": "false"}

    def test_update_sends_label_diff_and_reads_back(self, backend, facade):
        responses = iter([_response(202), _response(200, {"id": "si-1", "labels": {"env": ["prod"]}})])
        backend.handle(lambda _request: next(responses))

        instance, _ = facade.services.instance.update(
            ServiceInstanceUpdateInput(
                id="si-1",
                subaccount="sa-1",
                new_name="db2",
                labels_plan={"env": ["prod"]},
                labels_state={"env": ["dev"]},
            )
        )

        assert instance.labels == {"env": ["prod"]}
        update, get = backend.requests
        update_params = _params(update)
        assert update_params["id"] == "si-1"
        assert update_params["newName"] == "db2"
        assert "plan" not in update_params
        assert json.loads(update_params["labels"])[0] == {"op": "remove", "key": "env", "values": ["dev"]}
        assert _params(get) == {"subaccount": "sa-1", "id": "si-1", "parameters": "false"}

    def test_update_without_label_changes(self, backend, facade):
        responses = iter([_response(202), _response(200, {"id": "si-1"})])
        backend.handle(lambda _request: next(responses))

        facade.services.instance.update(ServiceInstanceUpdateInput(id="si-1", subaccount="sa-1"))

        assert "labels" not in _params(backend.requests[0])

    def test_update_unexpected_status(self, backend, facade):
        backend.respond(content=b"", backend_status=200)

        with pytest.raises(BackendError, match="the backend responded with an unknown error: 200") as exc_info:
            facade.services.instance.update(ServiceInstanceUpdateInput(id="si-1", subaccount="sa-1"))

        assert exc_info.value.command_response.status_code == 200
        assert len(backend.requests) == 1

    def test_delete_confirms(self, backend, facade):
        backend.respond(content=b"", backend_status=202)

        res = facade.services.instance.delete("sa-1", "si-1")

        assert res.status_code == 202
        assert backend.last_params() == {"subaccount": "sa-1", "id": "si-1", "confirm": "true"}

    def test_broker_error_message(self, backend, facade):
        backend.respond(
            json_body={"error": "Service broker error", "broker_error": {"Description": "quota exceeded"}},
            backend_status=502,
        )

        with pytest.raises(BackendError, match="Service broker error - quota exceeded"):
            facade.services.instance.create(
                ServiceInstanceCreateInput(name="db", subaccount="sa-1", service_plan_id="plan-1")
            )


class TestBinding:
    def test_create(self, backend, facade):
        backend.respond(json_body={"id": "sb-1", "credentials": {"user": "u"}}, backend_status=201)

        binding, _ = facade.services.binding.create(
            SubaccountServiceBindingCreateInput(subaccount="sa-1", service_instance_id="si-1", name="key")
        )

        assert binding.credentials == {"user": "u"}
        assert backend.last_params() == {"subaccount": "sa-1", "serviceInstanceID": "si-1", "name": "key"}

    def test_get_by_name(self, backend, facade):
        backend.respond(json_body={"id": "sb-1"})

        facade.services.binding.get_by_name("sa-1", "key")

        assert backend.last_params() == {"subaccount": "sa-1", "name": "key"}


class TestBroker:
    def test_register(self, backend, facade):
        backend.respond(json_body={"id": "br-1"}, backend_status=201)

        facade.services.broker.register(
            SubaccountServiceBrokerRegisterInput(
                subaccount="sa-1", name="my-broker", url="https://broker.test", user="u", password="p"
            )
        )

        assert backend.last_request.url.query == b"register"
        assert backend.last_params() == {
            "subaccount": "sa-1",
            "name": "my-broker",
            "url": "https://broker.test",
            "user": "u",
            "password": "p",
        }

    def test_unregister_confirms(self, backend, facade):
        backend.respond(content=b"")

        facade.services.broker.unregister("sa-1", "br-1")

        assert backend.last_request.url.query == b"unregister"
        assert backend.last_params() == {"subaccount": "sa-1", "id": "br-1", "confirm": "true"}


class TestCatalog:
    def test_offering_list_by_environment(self, backend, facade):
        backend.respond(json_body=[{"id": "off-1", "name": "hana-cloud"}])

        offerings, _ = facade.services.offering.list("sa-1", environment="cloudfoundry")

        assert offerings[0].name == "hana-cloud"
        assert backend.last_params() == {"subaccount": "sa-1", "environment": "cloudfoundry"}

    def test_plan_get_by_name_needs_offering(self, backend, facade):
        backend.respond(json_body={"id": "plan-1", "name": "hana"})

        plan, _ = facade.services.plan.get_by_name("sa-1", "hana", "hana-cloud")

        assert plan.id == "plan-1"
        assert backend.last_params() == {"subaccount": "sa-1", "name": "hana", "offeringName": "hana-cloud"}

    def test_platform_get_by_id(self, backend, facade):
        backend.respond(json_body={"id": "pl-1", "type": "kubernetes"})

        platform, _ = facade.services.platform.get_by_id("sa-1", "pl-1")

        assert platform.type == "kubernetes"
        assert backend.last_params() == {"subaccount": "sa-1", "id": "pl-1"}
