"""Constantes del protocolo de la BTP CLI (versión y headers).

La versión viaja en la ruta de cada endpoint y fija el contrato con el backend.
"""

from __future__ import annotations

CLI_TARGET_PROTOCOL_VERSION = "v2.38.0"

HEADER_CORRELATION_ID = "X-CorrelationId"
HEADER_ID_TOKEN = "X-Id-Token"
HEADER_CLI_FORMAT = "X-CPCLI-Format"
HEADER_CLI_REFRESH_TOKEN = "X-CPCLI-RefreshToken"
HEADER_CLI_REPLACEMENT_REFRESH_TOKEN = "X-CPCLI-ReplacementRefreshtoken"
HEADER_CLI_SUBDOMAIN = "X-CPCLI-Subdomain"
HEADER_CLI_CUSTOM_IDP = "X-CPCLI-CustomIdp"
HEADER_CLI_BACKEND_STATUS = "X-CPCLI-Backend-Status"
HEADER_CLI_BACKEND_MESSAGE = "X-CPCLI-Backend-Message"
HEADER_CLI_BACKEND_MEDIA_TYPE = "X-CPCLI-Backend-MediaType"
