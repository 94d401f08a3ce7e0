from os import environ, getenv
from typing import Literal

from exceptions import ConfigurationError
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    ValidationError,
    field_validator,
)

SLACK_WEBHOOK_URL = "https://hooks.slack.com/services/{workspace}/{channel}/{webhook}"
DEFAULT_SECRETS_EXTENSION_PORT = 2773


class FailedAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    additionalInformation: str = ""


class AdditionalAttributes(BaseModel):
    model_config = ConfigDict(frozen=True)

    failedActions: list[FailedAction] | None = None


class Message(BaseModel):
    """SNS message body published by EventBridge and CodePipeline notifications."""

    model_config = ConfigDict(frozen=True)

    detail: dict[str, JsonValue] = Field(default_factory=dict)
    resources: list[str] = Field(default_factory=list)
    additionalAttributes: AdditionalAttributes = Field(
        default_factory=AdditionalAttributes
    )

    @field_validator("detail", "additionalAttributes", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return {} if v is None else v


class SlackWebhookSecret(BaseModel):
    model_config = ConfigDict(frozen=True, hide_input_in_errors=True)

    Workspace: str
    Channel: str
    Webhook: str

    @property
    def webhook_url(self) -> str:
        return SLACK_WEBHOOK_URL.format(
            workspace=self.Workspace, channel=self.Channel, webhook=self.Webhook
        )


class DispatcherConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    secret_name: str
    session_token: str
    block_style: Literal["simple", "rich"] = "simple"
    secrets_extension_port: int = DEFAULT_SECRETS_EXTENSION_PORT

    @classmethod
    def from_environ(cls) -> "DispatcherConfig":
        """Read the dispatcher configuration from the Lambda environment."""
        try:
            return cls(
                secret_name=environ["SECRET_NAME"],
                session_token=environ["AWS_SESSION_TOKEN"],
                block_style=getenv("SLACK_BLOCK_STYLE", "simple"),
                secrets_extension_port=getenv(
                    "PARAMETERS_SECRETS_EXTENSION_HTTP_PORT",
                    DEFAULT_SECRETS_EXTENSION_PORT,
                ),
            )
        except KeyError as e:
            raise ConfigurationError(
                f"Missing environment variable {e}", stage="Startup"
            ) from e
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid dispatcher configuration: {e}", stage="Startup"
            ) from e
