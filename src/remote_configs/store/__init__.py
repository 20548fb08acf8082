from .configs import ConfigStore
from .notifier import ChangeNotifier, Listener

__all__ = ["ChangeNotifier", "ConfigStore", "Listener"]
