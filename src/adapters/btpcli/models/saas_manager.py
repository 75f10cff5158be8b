"""Modelos del SaaS manager (suscripciones a aplicaciones)."""

from __future__ import annotations

from pydantic import Field

from adapters.btpcli.models.base import ResponseModel, Timestamp

STATE_IN_PROCESS = "IN_PROCESS"
STATE_SUBSCRIBED = "SUBSCRIBED"
STATE_SUBSCRIBE_FAILED = "SUBSCRIBE_FAILED"
STATE_UNSUBSCRIBED = "NOT_SUBSCRIBED"
STATE_UNSUBSCRIBE_FAILED = "UNSUBSCRIBE_FAILED"
STATE_UPDATE_FAILED = "UPDATE_FAILED"


class EntitledApplicationsResponseObject(ResponseModel):
    app_id: str = ""
    app_name: str = ""
    display_name: str = ""
    description: str = ""
    plan_name: str = ""
    category: str = ""
    state: str = ""
    subscription_guid: str = Field(default="", alias="subscriptionGUID")
    tenant_id: str = ""
    subscription_url: str = ""
    global_account_id: str = ""
    subaccount_id: str = ""
    labels: dict[str, list[str]] | None = None
    created_date: Timestamp = None
    modified_date: Timestamp = None


class EntitledApplicationsResponseCollection(ResponseModel):
    applications: list[EntitledApplicationsResponseObject] = Field(default_factory=list)


class SubscriptionAssignmentResponseObject(ResponseModel):
    job_status_id: str = ""
