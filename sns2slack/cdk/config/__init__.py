from pathlib import Path

from aws_cdk import aws_logs as logs
from pydantic import BaseModel, field_validator
from yaml import safe_load

from sns2slack.cdk.helpers import is_valid_sns_topic_arn
from sns2slack.core import constants

CONFIG_DIR = Path(__file__).parent


class SnsToSlackConfig(BaseModel):
    # Environment
    Environment: str

    # Variables
    TopicArn: str | None = None  # Existing topic, a new one is created when unset
    SecretName: str = constants.DEFAULT_SECRET_NAME
    Description: str = constants.DEFAULT_DESCRIPTION
    LogRetention: str = constants.DEFAULT_LOG_RETENTION
    BlockStyle: str = constants.DEFAULT_BLOCK_STYLE

    @field_validator("TopicArn")
    @classmethod
    def check_topic_arn(cls, v: str | None) -> str | None:
        if v is not None:
            assert is_valid_sns_topic_arn(v), "Invalid SNS topic ARN"
        return v

    @field_validator("LogRetention")
    @classmethod
    def check_log_retention(cls, v: str) -> str:
        assert (
            v in logs.RetentionDays.__members__
        ), f"Log retention must be one of {', '.join(logs.RetentionDays.__members__)}"
        return v

    @field_validator("BlockStyle")
    @classmethod
    def check_block_style(cls, v: str) -> str:
        assert (
            v in constants.BLOCK_STYLES
        ), f"Block style must be one of {', '.join(constants.BLOCK_STYLES)}"
        return v

    @property
    def log_retention(self) -> logs.RetentionDays:
        return logs.RetentionDays[self.LogRetention]


def load_config(environment: str) -> SnsToSlackConfig:
    """Read the given environment's YAML configuration file."""
    with open(CONFIG_DIR / f"{environment}.yaml", "r") as f:
        return SnsToSlackConfig(**safe_load(f))
