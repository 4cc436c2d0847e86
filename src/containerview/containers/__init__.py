from containerview.containers.models import Container, ContainerGroup, ContainerParent
from containerview.containers.service import ContainerService

__all__ = ["Container", "ContainerGroup", "ContainerParent", "ContainerService"]
