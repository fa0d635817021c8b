from .context import IAppContext
from .register_listener import RegisterListener
from .transport import IMessageTransport

__all__ = ["IAppContext", "IMessageTransport", "RegisterListener"]
