from json import loads
from os import getenv
from typing import Callable

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import SNSEvent
from blocks import RENDERERS, Block
from exceptions import ConfigurationError, DecodeError, DeliveryError
from models import DispatcherConfig, Message, SlackWebhookSecret
from pydantic import ValidationError
from secret_accessor import fetch_secret
from slack_sdk.errors import SlackClientError
from slack_sdk.webhook import WebhookClient, WebhookResponse


def create_webhook_client(url: str) -> WebhookClient:
    """Slack webhook client without the SDK's connection error retry."""
    return WebhookClient(url, retry_handlers=[])


class Dispatcher:
    def __init__(
        self,
        config: DispatcherConfig,
        webhook_client_factory: Callable[[str], WebhookClient] = create_webhook_client,
    ) -> None:
        self.config = config
        self.render = RENDERERS[config.block_style]
        self.webhook_client_factory = webhook_client_factory
        # Setup logger
        self.logger = Logger(
            service=getenv("AWS_LAMBDA_FUNCTION_NAME"),
            datefmt="%Y-%m-%dT%H:%M:%S.%f",
            use_datetime_directive=True,
            utc=True,
        )
        if version := getenv("VERSION"):
            self.logger.append_keys(Version=version)

    def dispatch(self, event: SNSEvent) -> None:
        """Forward the event's first SNS message to Slack."""
        message = self.decode(event)
        self.logger.debug("Decoded message", message=message.model_dump())

        secret = self.load_secret()
        self.logger.debug("Loaded secret '%s'", self.config.secret_name)

        blocks = self.render(message)
        self.logger.debug(
            "Rendered %d '%s' block(s)",
            len(blocks),
            self.config.block_style,
            blocks=blocks,
        )

        self.deliver(secret, blocks)
        self.logger.info(
            "Notification for '%s' sent to Slack as %d block(s)",
            message.resources[0] if message.resources else None,
            len(blocks),
        )

    def decode(self, event: SNSEvent) -> Message:
        """Parse the first record's SNS message."""
        records = event.get("Records") or []
        if not records:
            raise DecodeError("Event contains no SNS records")
        if len(records) > 1:
            self.logger.warning(
                "Event contains %d records, only the first is forwarded", len(records)
            )

        try:
            raw_message = event.sns_message
        except (KeyError, TypeError) as e:
            raise DecodeError("First record has no SNS message") from e

        try:
            return Message.model_validate_json(raw_message)
        except (ValidationError, TypeError) as e:
            raise DecodeError(f"SNS message is malformed: {e}") from e

    def load_secret(self) -> SlackWebhookSecret:
        """Fetch and decode the Slack webhook secret."""
        secret_string = fetch_secret(
            self.config.secret_name,
            self.config.session_token,
            self.config.secrets_extension_port,
        )

        try:
            secret = loads(secret_string) if secret_string else None
        except ValueError as e:
            raise ConfigurationError(
                f"secret '{self.config.secret_name}' is not valid JSON"
            ) from e

        if not secret:
            raise ConfigurationError("secret is empty cannot continue")

        try:
            return SlackWebhookSecret.model_validate(secret)
        except ValidationError as e:
            raise ConfigurationError(
                f"secret '{self.config.secret_name}' must define Workspace, Channel and Webhook"
            ) from e

    def deliver(self, secret: SlackWebhookSecret, blocks: list[Block]) -> None:
        """Post the rendered blocks to the Slack incoming webhook."""
        webhook = self.webhook_client_factory(secret.webhook_url)

        try:
            response: WebhookResponse = webhook.send_dict({"blocks": blocks})
        except (OSError, SlackClientError) as e:
            raise DeliveryError("Failed to reach Slack webhook") from e

        if response.status_code != 200:
            raise DeliveryError(
                f"Slack webhook responded with {response.status_code}: {response.body}",
                response.status_code,
            )
