from dataclasses import dataclass
from typing import Optional, Protocol

from aws_cdk import (
    Resource,
    aws_iot as iot,
)
from constructs import Construct

from iot_topic_rule.arn import ArnResolver, StackArnResolver
from iot_topic_rule.errors import ValidationError
from iot_topic_rule.iot_sql import IotSqlConfig


class ITopicRule(Protocol):
    """Represents an AWS IoT Rule."""

    @property
    def topic_rule_arn(self) -> str:
        """ARN of the rule, such as arn:aws:iot:us-east-2:123456789012:rule/rule_name"""
        ...

    @property
    def topic_rule_name(self) -> str:
        ...


class SqlSource(Protocol):
    def bind(self, scope: Construct) -> IotSqlConfig:
        ...


@dataclass(frozen=True)
class TopicRuleProps:
    sql: SqlSource
    topic_rule_name: Optional[str] = None


@dataclass(frozen=True)
class ImportedTopicRule:
    """Reference to a rule that already exists outside this app."""

    node_id: str
    topic_rule_arn: str
    topic_rule_name: str


def import_topic_rule_from_arn(
    scope: Construct,
    id: str,
    topic_rule_arn: str,
    resolver: Optional[ArnResolver] = None,
) -> ImportedTopicRule:
    """
    Import an existing AWS IoT Rule provided an ARN.

    ``topic_rule_arn`` looks like arn:aws:iot:<region>:<account-id>:rule/MyRule.
    Nothing is added to the construct tree.
    """
    resolver = resolver or StackArnResolver(scope)
    resource_name = resolver.split_resource_name(topic_rule_arn)
    if not resource_name:
        raise ValidationError(f"Missing topic rule name in ARN: '{topic_rule_arn}'")

    return ImportedTopicRule(
        node_id=id,
        topic_rule_arn=topic_rule_arn,
        topic_rule_name=resource_name,
    )


class TopicRule(Resource):
    """Defines an AWS IoT Rule in this stack."""

    @staticmethod
    def from_topic_rule_arn(scope: Construct, id: str, topic_rule_arn: str) -> ImportedTopicRule:
        return import_topic_rule_from_arn(scope, id, topic_rule_arn)

    def __init__(
        self,
        scope: Construct,
        id: str,
        *,
        sql: SqlSource,
        topic_rule_name: Optional[str] = None,
    ):
        super().__init__(scope, id, physical_name=topic_rule_name)

        sql_config = sql.bind(self)

        resource = iot.CfnTopicRule(
            self,
            "Resource",
            rule_name=self._physical_name,
            topic_rule_payload=iot.CfnTopicRule.TopicRulePayloadProperty(
                actions=[],
                aws_iot_sql_version=sql_config.aws_iot_sql_version,
                sql=sql_config.sql,
            ),
        )

        self.topic_rule_arn = self._get_resource_arn_attribute(
            resource.attr_arn,
            service="iot",
            resource="rule",
            resource_name=self._physical_name,
        )
        self.topic_rule_name = self._get_resource_name_attribute(resource.ref)

    @classmethod
    def from_props(cls, scope: Construct, id: str, props: TopicRuleProps) -> "TopicRule":
        return cls(scope, id, sql=props.sql, topic_rule_name=props.topic_rule_name)
