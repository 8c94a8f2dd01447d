from paysync.config.settings import Settings
from paysync.pdf.base import BasePdfEngine
from paysync.sealing.base import BasePageSealer
from paysync.sealing.local_sealer import LocalPageSealer
from paysync.sealing.remote_sealer import RemotePageSealer


class SealerFactory:
    """Creates the configured sealing backend."""

    BACKENDS = ("local", "remote")

    @classmethod
    def create(cls, settings: Settings, engine: BasePdfEngine) -> BasePageSealer:
        backend = settings.seal_backend.lower()
        if backend == "local":
            return LocalPageSealer(engine, owner_password=settings.seal_owner_password)
        if backend == "remote":
            base_url = settings.seal_remote_base_url.strip()
            if not base_url:
                raise ValueError(
                    "seal_remote_base_url is required for seal_backend=remote"
                )
            return RemotePageSealer(
                base_url=base_url,
                timeout_seconds=settings.seal_remote_timeout_seconds,
            )
        raise ValueError(
            f"Unknown seal backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
