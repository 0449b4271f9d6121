"""Cliente HTTP base para chamadas aos endpoints do Google."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP simples, sem retry.

    Respostas não-2xx são devolvidas ao chamador, que decide o erro de
    domínio; só falhas de transporte propagam como exceção do httpx.

    Args:
        config: Timeout, headers padrão e verificação TLS.
        transport: Transport httpx opcional (ex.: httpx.MockTransport em testes).
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def post_form(
        self,
        url: str,
        data: dict[str, str],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """POST application/x-www-form-urlencoded."""
        return await self._request("POST", url, data=data, headers=headers)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        async with httpx.AsyncClient(
            verify=self._config.verify_ssl,
            transport=self._transport,
            timeout=self._config.timeout_seconds,
        ) as client:
            response = await client.request(method, url, headers=merged_headers, **kwargs)
        logger.debug(
            "http_request_done",
            extra={"method": method, "url": url, "status_code": response.status_code},
        )
        return response


def status_text(response: httpx.Response) -> str:
    """Reason phrase da resposta, com fallback para o código numérico."""
    return response.reason_phrase or str(response.status_code)
