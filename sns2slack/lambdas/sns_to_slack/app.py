from aws_lambda_powertools.utilities.data_classes import SNSEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext
from dispatcher import Dispatcher
from exceptions import SnsToSlackError
from models import DispatcherConfig

dispatcher = Dispatcher(DispatcherConfig.from_environ())


@event_source(data_class=SNSEvent)
def lambda_handler(event: SNSEvent, context: LambdaContext) -> None:
    """SNS to Slack Lambda Handler for SNS events."""
    dispatcher.logger.debug(
        "Received event",
        event=event.raw_event,
        AWSRequestId=getattr(context, "aws_request_id", None),
        FunctionName=getattr(context, "function_name", None),
        MemoryLimit=getattr(context, "memory_limit_in_mb", None),
        SecretName=dispatcher.config.secret_name,
    )
    try:
        dispatcher.dispatch(event)
    except SnsToSlackError as e:
        dispatcher.logger.exception(
            "%s stage failed: %s", e.stage or "Dispatch", type(e).__name__
        )
        raise
