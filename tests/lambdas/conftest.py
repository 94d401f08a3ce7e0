from os import environ
from sys import path

from pytest import fixture

from docs import VERSION
from sns2slack.lambdas import PATH

# For Lambda source code relative imports
path.append(f"{PATH}/sns_to_slack")

SECRET_NAME = "slack/webhook"
SESSION_TOKEN = "session-token"


@fixture(autouse=True)
def lambda_environment_variables():
    environ["AWS_LAMBDA_FUNCTION_NAME"] = "test"
    environ["POWERTOOLS_DEV"] = "true"  # Pretty print logs
    environ["VERSION"] = VERSION
    environ["SECRET_NAME"] = SECRET_NAME
    environ["AWS_SESSION_TOKEN"] = SESSION_TOKEN
    environ["SLACK_BLOCK_STYLE"] = "simple"
