import aws_cdk as cdk
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_logs as logs
from aws_cdk import aws_secretsmanager as secretsmanager
from aws_cdk import aws_sns as sns
from aws_cdk import aws_sns_subscriptions as sns_subscriptions
from constructs import Construct

from docs import VERSION
from sns2slack.cdk import helpers
from sns2slack.core import constants
from sns2slack.lambdas import PATH as LAMBDAS_PATH


class SnsToSlackWebhook(Construct):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        sns_topic: sns.ITopic,
        secret_name: str | None = None,
        description: str | None = None,
        log_retention: logs.RetentionDays | None = None,
        block_style: str = constants.DEFAULT_BLOCK_STYLE,
    ) -> None:
        """Forwards notifications published to an SNS topic to a Slack incoming webhook

        Args:
            scope (Construct): Parent construct
            construct_id (str): Construct ID
            sns_topic (sns.ITopic): Topic whose notifications are forwarded
            secret_name (str, optional): Secrets Manager secret holding the Workspace, Channel and Webhook path segments. Defaults to "slack/webhook"
            description (str, optional): Lambda function description. Defaults to "SNS to Slack Webhook"
            log_retention (logs.RetentionDays, optional): Lambda log retention. Defaults to one month
            block_style (str, optional): "simple" or "rich" Slack message layout. Defaults to "simple"
        """
        super().__init__(scope, construct_id)

        if block_style not in constants.BLOCK_STYLES:
            raise ValueError(f"Unknown Slack block style '{block_style}'")

        self.secret: secretsmanager.ISecret = secretsmanager.Secret.from_secret_name_v2(
            self,
            "SnsToSlackSecret",
            secret_name or constants.DEFAULT_SECRET_NAME,
        )

        self.log_group: logs.LogGroup = logs.LogGroup(
            self,
            "SnsToSlackLogGroup",
            retention=log_retention or logs.RetentionDays[constants.DEFAULT_LOG_RETENTION],
            removal_policy=cdk.RemovalPolicy.DESTROY,
        )

        self.function: lambda_.Function = lambda_.Function(
            self,
            "SnsToSlackFunction",
            handler="app.lambda_handler",
            runtime=lambda_.Runtime.PYTHON_3_12,
            architecture=lambda_.Architecture.ARM_64,
            code=lambda_.Code.from_asset(
                LAMBDAS_PATH + "/sns_to_slack/",
                bundling=(
                    None
                    if helpers.is_pytest()
                    else cdk.BundlingOptions(
                        image=lambda_.Runtime.PYTHON_3_12.bundling_image,
                        platform="linux/arm64",
                        command=[
                            "bash",
                            "-c",
                            "pip install -r requirements.txt -t /asset-output && cp -au . /asset-output",
                        ],
                    )
                ),
            ),
            description=description or constants.DEFAULT_DESCRIPTION,
            memory_size=constants.FUNCTION_MEMORY_SIZE,
            timeout=cdk.Duration.seconds(constants.FUNCTION_TIMEOUT_SECONDS),
            reserved_concurrent_executions=constants.FUNCTION_RESERVED_CONCURRENCY,
            log_group=self.log_group,
            layers=[
                lambda_.LayerVersion.from_layer_version_arn(
                    self,
                    "PowertoolsLayer",
                    layer_version_arn=constants.POWERTOOLS_LAYER_ARN_TEMPLATE.substitute(
                        region=cdk.Stack.of(self).region
                    ),
                )
            ],
            params_and_secrets=lambda_.ParamsAndSecretsLayerVersion.from_version(
                lambda_.ParamsAndSecretsVersions.V1_0_103,
                secrets_manager_ttl=cdk.Duration.seconds(
                    constants.SECRETS_CACHE_TTL_SECONDS
                ),
                parameter_store_ttl=cdk.Duration.seconds(
                    constants.SECRETS_CACHE_TTL_SECONDS
                ),
                max_connections=constants.SECRETS_EXTENSION_MAX_CONNECTIONS,
                log_level=lambda_.ParamsAndSecretsLogLevel.DEBUG,
            ),
            current_version_options=lambda_.VersionOptions(
                removal_policy=cdk.RemovalPolicy.DESTROY
            ),
            environment={
                constants.SECRET_NAME: self.secret.secret_name,
                constants.SLACK_BLOCK_STYLE: block_style,
                constants.POWERTOOLS_SERVICE_NAME: "sns-to-slack",
                constants.VERSION: VERSION,
            },
        )

        self.secret.grant_read(self.function)
        sns_topic.add_subscription(sns_subscriptions.LambdaSubscription(self.function))
