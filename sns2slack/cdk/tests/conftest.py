from functools import partial
from json import load
from pathlib import Path
from typing import Callable

from aws_cdk import App, Aspects, Environment, Stack
from aws_cdk.assertions import Template
from cdk_nag import AwsSolutionsChecks, NagPackSuppression, NagSuppressions
from pytest import fixture

from docs import VERSION
from sns2slack.cdk.config import SnsToSlackConfig, load_config
from sns2slack.cdk.helpers import create_resource_name
from sns2slack.cdk.notifier.stack import SnsToSlackStack

TESTS_DIR = Path(__file__).parent
IMPORTED_TOPIC_ARN = "arn:aws:sns:ca-central-1:111111111111:build-notifications"

env = Environment(account="111111111111", region="ca-central-1")
config = load_config("test")

tags = {
    "Project": "SnsToSlack",
    "Version": VERSION,
    "Environment": config.Environment.capitalize(),
}


def create_stack(construct_id: str, config: SnsToSlackConfig) -> SnsToSlackStack:
    return SnsToSlackStack(
        scope=App(),
        construct_id=construct_id,
        stack_name=construct_id,
        env=env,
        config=config,
        tags=tags,
    )


@fixture(scope="session")
def sns_to_slack_stack() -> SnsToSlackStack:
    return create_stack("SnsToSlackStackTesting", config)


@fixture(scope="session")
def imported_topic_stack() -> SnsToSlackStack:
    return create_stack(
        "SnsToSlackImportedTopicStackTesting",
        config.model_copy(update={"TopicArn": IMPORTED_TOPIC_ARN}),
    )


@fixture(scope="session")
def _create_resource_name() -> Callable:
    return partial(create_resource_name, environment=config.Environment)


# See https://github.com/cdklabs/cdk-nag/blob/main/RULES.md for all rules
def read_suppressions(exclusions: list[str]) -> list[NagPackSuppression]:
    with open(TESTS_DIR / "nag_suppressions.json", "r") as f:
        suppressions = load(f)

    return [
        NagPackSuppression(id=id, reason=reason)
        for id, reason in suppressions.items()
        if id not in exclusions
    ]


def suppress_nag(stack: Stack, exclusions: list[str] = []) -> None:
    NagSuppressions.add_stack_suppressions(
        stack=stack, suppressions=read_suppressions(exclusions)
    )


@fixture(scope="session")
def sns_to_slack_stack_template(sns_to_slack_stack) -> Template:
    return Template.from_stack(sns_to_slack_stack)


@fixture(scope="session")
def imported_topic_stack_template(imported_topic_stack) -> Template:
    return Template.from_stack(imported_topic_stack)


@fixture(scope="session")
def sns_to_slack_stack_nag() -> Stack:
    stack = create_stack("SnsToSlackNagStackTesting", config)
    suppress_nag(stack)
    Aspects.of(stack).add(AwsSolutionsChecks())
    return stack
