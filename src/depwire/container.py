from depwire._internal.container import Container, ContainerProtocol
from depwire._internal.registry import Factory

__all__ = ["Container", "ContainerProtocol", "Factory"]
