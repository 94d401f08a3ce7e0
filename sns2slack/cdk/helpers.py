from os import getenv
from re import match
from sys import modules

import aws_cdk as cdk


def create_resource_name(
    resource_name: str, scope: cdk.Stack = None, environment: str = None
) -> str:
    if environment is None and scope is not None:
        environment = scope.tags.tag_values()["Environment"]
    if scope is None:
        region = getenv("CDK_DEFAULT_REGION", "ca-central-1")
    else:
        region = scope.region
    return f"SnsToSlack-{resource_name}-{environment.lower()}-{region}"


def is_pytest() -> bool:
    return "pytest" in modules


def is_valid_sns_topic_arn(value: str) -> bool:
    """Checks whether the given value is a valid SNS topic ARN"""
    arn_pattern = r"^arn:aws[\w-]*:sns:[a-z]{2}(-[a-z]+)+-\d:\d{12}:[\w-]{1,256}(\.fifo)?$"
    return match(arn_pattern, value) is not None
