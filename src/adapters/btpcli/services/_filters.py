"""Parámetros comunes de los `list` del service manager."""

from __future__ import annotations


def list_params(subaccount_id: str, fields_filter: str = "", labels_filter: str = "", environment: str = "") -> dict[str, str]:
    params = {"subaccount": subaccount_id}
    if fields_filter:
        params["fieldsFilter"] = fields_filter
    if labels_filter:
        params["labelsFilter"] = labels_filter
    if environment:
        params["environment"] = environment
    return params
