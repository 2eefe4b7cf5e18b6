#!/usr/bin/env python3
"""
Network proxy utilities for Newslingo.
Composes upstream requests for the proxy boundary and sends them with httpx.
"""
import json
from dataclasses import dataclass, field
from typing import Dict, Optional

import httpx


@dataclass(frozen=True)
class ProxyRequest:
    """An upstream HTTP request described for the proxy boundary."""
    origin: str
    path: str
    method: str = "POST"
    protocol: str = "https"
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None

    @property
    def url(self) -> str:
        return f"{self.protocol}://{self.origin}{self.path}"

    def to_payload(self) -> dict:
        """Envelope accepted by the proxy endpoint."""
        return {
            "protocol": self.protocol,
            "origin": self.origin,
            "path": self.path,
            "method": self.method,
            "headers": dict(self.headers),
            "body": self.body,
        }


class ProxyClient:
    """Sends upstream requests, through the proxy endpoint when one is configured."""

    def __init__(self, proxy_url: str = "", timeout: float = 30, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize the proxy client.

        Args:
            proxy_url (str): Proxy endpoint; empty sends requests directly upstream
            timeout (float): Request timeout in seconds
            transport (httpx.AsyncBaseTransport, optional): Custom transport (tests)
        """
        self.proxy_url = proxy_url
        self.timeout = timeout
        self.transport = transport

    async def forward(self, request: ProxyRequest) -> httpx.Response:
        """Send the request and return the upstream response verbatim.

        Args:
            request (ProxyRequest): Upstream request description

        Returns:
            httpx.Response: Response as returned by the proxy or the upstream

        Raises:
            httpx.HTTPError: On transport failures
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            if self.proxy_url:
                return await client.post(
                    self.proxy_url,
                    headers={"Content-Type": "application/json"},
                    json=request.to_payload(),
                )
            return await client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )


def json_body(payload: dict) -> str:
    """Serialize an upstream JSON body the way the proxy envelope expects it."""
    return json.dumps(payload, ensure_ascii=False)
