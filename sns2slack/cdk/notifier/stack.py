from functools import partial

import aws_cdk as cdk
from aws_cdk import aws_kms as kms
from aws_cdk import aws_sns as sns
from constructs import Construct

from sns2slack.cdk import helpers
from sns2slack.cdk.config import SnsToSlackConfig
from sns2slack.cdk.slack_constructs.sns_to_slack_webhook import SnsToSlackWebhook


class SnsToSlackStack(cdk.Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        config: SnsToSlackConfig,
        **kwargs,
    ) -> None:
        """Deploys the SNS topic and the Lambda forwarding its notifications to Slack

        Args:
            scope (Construct): CDK app
            construct_id (str): Stack name
            config (SnsToSlackConfig): Environment specific configuration parameters
        """
        super().__init__(scope, construct_id, **kwargs)

        self._config = config
        self._create_resource_name = partial(
            helpers.create_resource_name, scope=self, environment=config.Environment
        )

        self.topic = self.create_or_import_topic()

        self.sns_to_slack = SnsToSlackWebhook(
            self,
            "SnsToSlackWebhook",
            sns_topic=self.topic,
            secret_name=config.SecretName,
            description=config.Description,
            log_retention=config.log_retention,
            block_style=config.BlockStyle,
        )

        cdk.CfnOutput(self, "TopicArn", value=self.topic.topic_arn)
        cdk.CfnOutput(
            self, "FunctionName", value=self.sns_to_slack.function.function_name
        )

    def create_or_import_topic(self) -> sns.ITopic:
        """Import the configured topic, or create an encrypted one when none is given."""
        if self._config.TopicArn:
            return sns.Topic.from_topic_arn(
                self, "NotificationsTopic", self._config.TopicArn
            )

        master_key = kms.Key(
            self,
            "NotificationsTopicKey",
            description="Master Key for SNS to Slack Notifications Topic",
            enable_key_rotation=True,
            removal_policy=cdk.RemovalPolicy.DESTROY,
        )
        return sns.Topic(
            self,
            "NotificationsTopic",
            topic_name=self._create_resource_name("NotificationsTopic"),
            master_key=master_key,
            enforce_ssl=True,
        )
