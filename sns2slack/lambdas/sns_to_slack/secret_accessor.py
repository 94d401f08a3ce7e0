from json import loads
from os import getenv
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from aws_lambda_powertools import Logger
from exceptions import SecretFetchError
from models import DEFAULT_SECRETS_EXTENSION_PORT

logger = Logger(service=getenv("AWS_LAMBDA_FUNCTION_NAME"), child=True)

SECRETS_EXTENSION_HOST = "localhost"
SECRETS_EXTENSION_TOKEN_HEADER = "X-Aws-Parameters-Secrets-Token"


def fetch_secret(
    secret_name: str, token: str, port: int = DEFAULT_SECRETS_EXTENSION_PORT
) -> str:
    """Read given secret through the Parameters and Secrets Lambda Extension cache."""
    request = Request(
        f"http://{SECRETS_EXTENSION_HOST}:{port}/secretsmanager/get?"
        + urlencode({"secretId": secret_name}),
        headers={
            SECRETS_EXTENSION_TOKEN_HEADER: token,
            "Accept": "application/json",
            "Content-Type": "application/json",
        },
    )
    try:
        with urlopen(request) as response:
            return loads(response.read())["SecretString"]
    except (OSError, ValueError, KeyError, TypeError) as e:
        logger.error("Failed to fetch secret '%s': %s", secret_name, e)
        raise SecretFetchError(
            f"Unable to fetch secret '{secret_name}'", secret_name
        ) from e
