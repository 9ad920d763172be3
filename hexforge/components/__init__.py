"""Component generators, one per kind of scaffolded component."""

from .adapter import ADAPTER_DESCRIPTOR, AdapterGenerator
from .domain import DOMAIN_DESCRIPTOR, DomainGenerator
from .handler import HANDLER_DESCRIPTOR, HandlerGenerator
from .port import PORT_DESCRIPTOR, PortGenerator
from .service import SERVICE_DESCRIPTOR, ServiceGenerator

__all__ = [
    "AdapterGenerator",
    "DomainGenerator",
    "HandlerGenerator",
    "PortGenerator",
    "ServiceGenerator",
    "ADAPTER_DESCRIPTOR",
    "DOMAIN_DESCRIPTOR",
    "HANDLER_DESCRIPTOR",
    "PORT_DESCRIPTOR",
    "SERVICE_DESCRIPTOR",
]
