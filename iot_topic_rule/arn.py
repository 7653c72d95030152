from typing import Optional, Protocol

from aws_cdk import ArnFormat, Stack
from constructs import Construct


class ArnResolver(Protocol):
    def split_resource_name(self, arn: str) -> Optional[str]:
        ...

    def compose_arn(self, service: str, resource: str, resource_name: str) -> str:
        ...


class StackArnResolver:
    """Splits and formats ARNs in the context of the stack owning ``scope``."""

    def __init__(self, scope: Construct):
        self._stack = Stack.of(scope)

    def split_resource_name(self, arn: str) -> Optional[str]:
        parts = self._stack.split_arn(arn, ArnFormat.SLASH_RESOURCE_NAME)
        return parts.resource_name or None

    def compose_arn(self, service: str, resource: str, resource_name: str) -> str:
        return self._stack.format_arn(
            service=service,
            resource=resource,
            resource_name=resource_name,
            arn_format=ArnFormat.SLASH_RESOURCE_NAME,
        )
