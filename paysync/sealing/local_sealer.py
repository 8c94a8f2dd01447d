import asyncio

from paysync.logging.logger import Log
from paysync.pdf.base import BasePdfEngine
from paysync.pdf.exceptions import PdfError
from paysync.pdf.models import DEFAULT_PERMISSIONS, SealPermissions
from paysync.sealing.base import BasePageSealer
from paysync.sealing.exceptions import SealError


class LocalPageSealer(BasePageSealer):
    """Seals pages in-process with the configured PDF engine."""

    def __init__(
        self,
        engine: BasePdfEngine,
        owner_password: str,
        permissions: SealPermissions = DEFAULT_PERMISSIONS,
    ) -> None:
        if not owner_password:
            raise ValueError("owner_password must not be empty")
        self._engine = engine
        self._owner_password = owner_password
        self._permissions = permissions

    async def seal(self, page_bytes: bytes, identity_key: str, source_label: str = "") -> bytes:
        if not identity_key:
            raise SealError("Identity key is empty; refusing to seal without a password")
        if not page_bytes:
            raise SealError("Page is empty")
        try:
            sealed = await asyncio.to_thread(
                self._engine.encrypt,
                page_bytes,
                user_password=identity_key,
                owner_password=self._owner_password,
                permissions=self._permissions,
            )
        except PdfError as exc:
            raise SealError(f"Local sealing failed: {exc}") from exc
        Log.debug(f"Sealed page locally for key {Log.mask(identity_key)} ({len(sealed)} bytes)")
        return sealed
