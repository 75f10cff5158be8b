"""Cliente de la BTP CLI y sus fachadas por dominio.

Uso típico:

    with ClientFacade(new_v2_client(settings)) as btp:
        btp.login(new_login_request(subdomain, user, password))
        subaccounts, _ = btp.accounts.subaccount.list()
"""

from adapters.btpcli.base import CommandFacade, do_execute, first_element_or_default, nth_element_or_default
from adapters.btpcli.client import V2Client, new_v2_client
from adapters.btpcli.facade import ClientFacade

__all__ = [
    "ClientFacade",
    "CommandFacade",
    "V2Client",
    "do_execute",
    "first_element_or_default",
    "new_v2_client",
    "nth_element_or_default",
]
