from paysync.sealing.base import BasePageSealer
from paysync.sealing.factory import SealerFactory
from paysync.sealing.local_sealer import LocalPageSealer
from paysync.sealing.remote_sealer import RemotePageSealer

__all__ = ["BasePageSealer", "LocalPageSealer", "RemotePageSealer", "SealerFactory"]
