from .echo_dev_client import EchoDevClient
from .lmstudio_client import LMStudioClient

__all__ = ["EchoDevClient", "LMStudioClient"]
