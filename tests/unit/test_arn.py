import json

import aws_cdk as core

from iot_topic_rule.arn import StackArnResolver


def _stack():
    return core.Stack(
        core.App(),
        "ArnStack",
        env=core.Environment(account="123456789012", region="us-east-2"),
    )


def test_split_resource_name():
    resolver = StackArnResolver(_stack())

    assert resolver.split_resource_name("arn:aws:iot:us-east-2:123456789012:rule/MyRule") == "MyRule"
    assert resolver.split_resource_name("arn:aws:iot:us-east-2:123456789012:rule") is None


def test_compose_arn():
    stack = _stack()
    arn = StackArnResolver(stack).compose_arn("iot", "rule", "MyRule")

    assert ":iot:us-east-2:123456789012:rule/MyRule" in json.dumps(stack.resolve(arn))
