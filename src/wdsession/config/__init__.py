from .remote_config import RemoteConfig

__all__ = [
    "RemoteConfig",
]
