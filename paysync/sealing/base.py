from abc import ABC, abstractmethod


class BasePageSealer(ABC):
    """Contract for all page sealing backends."""

    @abstractmethod
    async def seal(self, page_bytes: bytes, identity_key: str, source_label: str = "") -> bytes:
        """Return a password-protected copy of a single-page PDF.

        Args:
            page_bytes: Extracted single-page PDF.
            identity_key: Normalized identity key, used as the open password.
            source_label: Name of the roster the key came from.

        Returns:
            Sealed PDF bytes.

        Raises:
            SealError: on malformed input or any backend failure.
        """

    async def aclose(self) -> None:
        """Release backend resources. Local backends hold none."""
