from .log_sink import LogSink
from .remote_provider import RefreshCallback, RemoteProvider, Unsubscribe

# Public port exports keep wiring explicit at composition time.
__all__ = ["LogSink", "RefreshCallback", "RemoteProvider", "Unsubscribe"]
