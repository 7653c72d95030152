#!/usr/bin/env python3
import aws_cdk as cdk
import os

from iot_topic_rule.iot_sql import IotSql
from iot_topic_rule.stack_rules import DEFAULT_SQL, IotRulesStack

app = cdk.App()

env = cdk.Environment(
    account=os.getenv("CDK_DEFAULT_ACCOUNT") or os.getenv("AWS_ACCOUNT_ID"),
    region=os.getenv("CDK_DEFAULT_REGION") or os.getenv("AWS_REGION"),
)

rule_name = os.getenv("TOPIC_RULE_NAME")
sql = IotSql.from_string_as_ver_2016_03_23(os.getenv("TOPIC_RULE_SQL", DEFAULT_SQL))

rules = IotRulesStack(
    app,
    "IotRulesStack",
    rule_name=rule_name,
    sql=sql,
    env=env
)

app.synth()
