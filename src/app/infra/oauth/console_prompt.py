"""Consentimento OAuth pelo terminal.

Mostra a URL de consentimento e lê o retorno digitado pelo usuário: o
authorization code puro ou a URL de redirect completa (neste caso o
state é conferido).
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING
from urllib.parse import parse_qs, urlsplit

from app.protocols.authorization_prompt import AuthorizationPromptProtocol
from utils.errors import AuthorizationDeniedError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.oauth import AuthorizationRequest

logger = logging.getLogger(__name__)

PROVIDER_DESCRIPTION = "Connect your Google account"


class ConsoleAuthorizationPrompt(AuthorizationPromptProtocol):
    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ) -> None:
        self._input = input_func
        self._output = output_func

    async def request_code(self, auth_request: AuthorizationRequest) -> str:
        self._output(f"{PROVIDER_DESCRIPTION}\n\n{auth_request.to_url()}\n")
        answer = await asyncio.to_thread(
            self._input, "Authorization code or redirect URL: "
        )
        return extract_authorization_code(answer, expected_state=auth_request.state)


def extract_authorization_code(answer: str, *, expected_state: str) -> str:
    """Extrai o code de uma resposta digitada.

    Raises:
        AuthorizationDeniedError: resposta vazia, erro do provider ou state divergente.
    """
    value = answer.strip()
    if not value:
        raise AuthorizationDeniedError("Authorization cancelled")
    if "://" not in value:
        return value

    params = parse_qs(urlsplit(value).query)
    if error := params.get("error", [""])[0]:
        raise AuthorizationDeniedError(error)
    if params.get("state", [""])[0] != expected_state:
        logger.warning("oauth_state_mismatch", extra={"component": "console_prompt"})
        raise AuthorizationDeniedError("State mismatch")
    code = params.get("code", [""])[0]
    if not code:
        raise AuthorizationDeniedError("Missing authorization code")
    return code
