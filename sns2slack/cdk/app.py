#!/usr/bin/env python3
from datetime import date
from os import getenv
from pathlib import Path
from sys import path

import aws_cdk as cdk
from pydantic import ValidationError

root_dir = Path(__file__).resolve().parents[2]
path.append(str(root_dir))

from docs import VERSION
from sns2slack.cdk.config import load_config
from sns2slack.cdk.helpers import create_resource_name
from sns2slack.cdk.notifier.stack import SnsToSlackStack

app = cdk.App()

account = getenv("CDK_DEFAULT_ACCOUNT")
region = getenv("CDK_DEFAULT_REGION", "ca-central-1")

if environment := app.node.try_get_context("config"):
    try:
        config = load_config(environment)
    except FileNotFoundError:
        raise SystemExit(f"Error: Unrecognized environment '{environment}'")
    except ValidationError as e:
        raise SystemExit(f"Error: Invalid '{environment}' configuration\n{e}")

    tags = {
        "Project": "SnsToSlack",
        "LastUpdated": str(date.today()),
        "Version": VERSION,
        "Environment": config.Environment.capitalize(),
    }

    stack_name = create_resource_name(
        resource_name="Notifier", environment=config.Environment
    )
    SnsToSlackStack(
        scope=app,
        construct_id=stack_name,
        stack_name=stack_name,
        env=cdk.Environment(account=account, region=region),
        config=config,
        tags=tags,
    )
else:
    raise SystemExit(
        "Error: You must pass the 'config' context parameter, e.g. 'cdk synth -c config=dev'"
    )

app.synth()
