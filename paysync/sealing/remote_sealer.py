import base64

import httpx

from paysync.logging.logger import Log
from paysync.sealing.base import BasePageSealer
from paysync.sealing.exceptions import SealError, SealNetworkError


class RemotePageSealer(BasePageSealer):
    """Seals pages through the HTTP encryption service.

    Request: ``POST {base_url}/api/encrypt`` with a JSON body carrying the
    base64 page, the identity key and the roster file name. The response
    body is the sealed PDF.
    """

    ENCRYPT_PATH = "/api/encrypt"

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not base_url.strip():
            raise ValueError("base_url is required for the remote sealer")
        self._url = base_url.rstrip("/") + self.ENCRYPT_PATH
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout_seconds)

    async def seal(self, page_bytes: bytes, identity_key: str, source_label: str = "") -> bytes:
        if not identity_key:
            raise SealError("Identity key is empty; refusing to seal without a password")
        if not page_bytes:
            raise SealError("Page is empty")
        payload = {
            "pdfBase64": base64.b64encode(page_bytes).decode("ascii"),
            "employeeId": identity_key,
            "databaseFileName": source_label,
        }
        try:
            response = await self._client.post(self._url, json=payload)
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise SealNetworkError(f"Sealing service network error: {exc}") from exc
        except httpx.HTTPError as exc:
            raise SealNetworkError(f"Sealing service transport error: {exc}") from exc

        if response.is_error:
            raise SealError(
                f"Sealing service failed ({response.status_code}): {response.text or 'Unknown error'}"
            )
        sealed = response.content
        if not sealed.startswith(b"%PDF"):
            raise SealError("Sealing service returned a non-PDF response")
        Log.debug(f"Sealed page remotely for key {Log.mask(identity_key)} ({len(sealed)} bytes)")
        return sealed

    async def aclose(self) -> None:
        await self._client.aclose()
