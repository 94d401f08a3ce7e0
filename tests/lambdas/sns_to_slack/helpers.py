from json import dumps
from typing import Any
from unittest.mock import MagicMock

from . import constants


def make_sns_record(message: str) -> dict[str, Any]:
    return {
        "EventVersion": "1.0",
        "EventSubscriptionArn": f"{constants.TOPIC_ARN}:2bcfbf39-05c3-41de-beaa-fcfcc21c8f55",
        "EventSource": "aws:sns",
        "Sns": {
            "SignatureVersion": "1",
            "Timestamp": "2024-05-14T13:02:11.771Z",
            "Signature": "EXAMPLE",
            "SigningCertUrl": "https://sns.ca-central-1.amazonaws.com/SimpleNotificationService-0000000000000000000000.pem",
            "MessageId": "95df01b4-ee98-5cb9-9903-4c221d41eb5e",
            "Message": message,
            "MessageAttributes": {},
            "Type": "Notification",
            "UnsubscribeUrl": "https://sns.ca-central-1.amazonaws.com/?Action=Unsubscribe",
            "TopicArn": constants.TOPIC_ARN,
            "Subject": None,
        },
    }


def make_sns_event(*messages: dict[str, Any] | str) -> dict[str, Any]:
    return {
        "Records": [
            make_sns_record(message if isinstance(message, str) else dumps(message))
            for message in messages
        ]
    }


def make_webhook_client_factory(status_code: int = 200, body: str = "ok") -> MagicMock:
    webhook_client = MagicMock()
    webhook_client.send_dict.return_value = MagicMock(
        status_code=status_code, body=body
    )
    return MagicMock(return_value=webhook_client)
