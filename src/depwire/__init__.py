from depwire.container import Container, ContainerProtocol
from depwire.exceptions import (
    DepWireAutowireError,
    DepWireAutowireFailedError,
    DepWireCircularDependencyError,
    DepWireDuplicateRegistrationError,
    DepWireError,
    DepWireInaccessibleConstructorError,
    DepWireInvocationFailedError,
    DepWireNotFoundError,
    DepWireNotInstantiableError,
    DepWireTypeNotFoundError,
    DepWireUnresolvableParameterError,
)
from depwire.lock_mode import LockMode
from depwire.markers import DependsOn, non_public_constructor
from depwire.metadata import (
    MISSING,
    ConstructorVisibility,
    InstanceBuilder,
    ParameterDescriptor,
    ParameterKind,
    TypeDescriptor,
    TypeMetadataProvider,
    TypeRecorder,
)
from depwire.providers import (
    ReflectionTypeMetadataProvider,
    StaticTypeMetadataProvider,
    identifier_for,
)
from depwire.results import InvocationFailed, NotFound, Resolved, ResolutionOutcome

__all__ = [
    "MISSING",
    "ConstructorVisibility",
    "Container",
    "ContainerProtocol",
    "DepWireAutowireError",
    "DepWireAutowireFailedError",
    "DepWireCircularDependencyError",
    "DepWireDuplicateRegistrationError",
    "DepWireError",
    "DepWireInaccessibleConstructorError",
    "DepWireInvocationFailedError",
    "DepWireNotFoundError",
    "DepWireNotInstantiableError",
    "DepWireTypeNotFoundError",
    "DepWireUnresolvableParameterError",
    "DependsOn",
    "InstanceBuilder",
    "InvocationFailed",
    "LockMode",
    "NotFound",
    "ParameterDescriptor",
    "ParameterKind",
    "ReflectionTypeMetadataProvider",
    "Resolved",
    "ResolutionOutcome",
    "StaticTypeMetadataProvider",
    "TypeDescriptor",
    "TypeMetadataProvider",
    "TypeRecorder",
    "identifier_for",
    "non_public_constructor",
]
