from string import Template

# Deployment defaults
DEFAULT_SECRET_NAME = "slack/webhook"
DEFAULT_DESCRIPTION = "SNS to Slack Webhook"
DEFAULT_LOG_RETENTION = "ONE_MONTH"
DEFAULT_BLOCK_STYLE = "simple"
BLOCK_STYLES = ("simple", "rich")

# Lambda function settings
FUNCTION_TIMEOUT_SECONDS = 10
FUNCTION_MEMORY_SIZE = 128
FUNCTION_RESERVED_CONCURRENCY = 5
SECRETS_CACHE_TTL_SECONDS = 300
SECRETS_EXTENSION_MAX_CONNECTIONS = 20

# Environment variable names
SECRET_NAME = "SECRET_NAME"
SLACK_BLOCK_STYLE = "SLACK_BLOCK_STYLE"
POWERTOOLS_SERVICE_NAME = "POWERTOOLS_SERVICE_NAME"
VERSION = "VERSION"

POWERTOOLS_LAYER_ARN_TEMPLATE = Template(
    "arn:aws:lambda:$region:017000801446:layer:AWSLambdaPowertoolsPythonV3-python312-arm64:7"
)
