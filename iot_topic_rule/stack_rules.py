from typing import Optional

from aws_cdk import (
    CfnOutput,
    Stack,
)
from constructs import Construct

from iot_topic_rule.iot_sql import IotSql
from iot_topic_rule.topic_rule import TopicRule

DEFAULT_SQL = "SELECT * FROM 'users/+/devices/+/humidity'"


class IotRulesStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        rule_name: Optional[str] = None,
        sql: Optional[IotSql] = None,
        **kwargs,
    ):
        super().__init__(scope, construct_id, **kwargs)

        # IoT Rule
        self.humidity_rule = TopicRule(
            self,
            "HumidityRule",
            topic_rule_name=rule_name,
            sql=sql or IotSql.from_string_as_ver_2016_03_23(DEFAULT_SQL),
        )

        CfnOutput(self, "TopicRuleArn", value=self.humidity_rule.topic_rule_arn)
        CfnOutput(self, "TopicRuleName", value=self.humidity_rule.topic_rule_name)
