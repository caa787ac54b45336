"""Bearer token lookup from AWS Secrets Manager.

The token is read once per call to ``get_token``; no secret value is
cached between invocations. Secret store failures are classified,
logged with a diagnostic, and re-raised unchanged; a payload without a
token raises ``SecretRetrievalError``.
"""

from __future__ import annotations

import base64
import enum
import json
from typing import Any
from typing import Mapping
from typing import Optional
from typing import Protocol

from botocore.exceptions import BotoCoreError
from botocore.exceptions import ClientError

from osusearch.exceptions import SecretRetrievalError
from osusearch.services.aws_clients import get_secretsmanager_client
from osusearch.utils.logging import get_logger

logger = get_logger(__name__)

TOKEN_FIELD = "Token"


class SecretErrorKind(str, enum.Enum):
    """Classified GetSecretValue failure."""

    DECRYPTION_FAILURE = "DecryptionFailureException"
    INTERNAL_SERVICE_ERROR = "InternalServiceErrorException"
    INVALID_PARAMETER = "InvalidParameterException"
    INVALID_REQUEST = "InvalidRequestException"
    RESOURCE_NOT_FOUND = "ResourceNotFoundException"
    UNRECOGNIZED = "Unrecognized"

    @classmethod
    def from_code(cls, code: Optional[str]) -> SecretErrorKind:
        """Map a Secrets Manager error code to its kind."""
        try:
            kind = cls(code)
        except ValueError:
            return cls.UNRECOGNIZED
        return kind

    @property
    def diagnostic(self) -> Optional[str]:
        return _DIAGNOSTICS.get(self)


_DIAGNOSTICS: dict[SecretErrorKind, str] = {
    SecretErrorKind.DECRYPTION_FAILURE: (
        "Secrets Manager can't decrypt the protected secret text "
        "using the provided KMS key."
    ),
    SecretErrorKind.INTERNAL_SERVICE_ERROR: "An error occurred on the server side.",
    SecretErrorKind.INVALID_PARAMETER: (
        "You provided an invalid value for a parameter."
    ),
    SecretErrorKind.INVALID_REQUEST: (
        "You provided a parameter value that is not valid for the current "
        "state of the resource."
    ),
    SecretErrorKind.RESOURCE_NOT_FOUND: (
        "We can't find the resource that you asked for."
    ),
}


class CredentialProvider(Protocol):
    """Source of the upstream bearer token."""

    def get_token(self) -> str:
        ...


def error_code(exc: Exception) -> str:
    """Extract the service error code from a boto exception."""
    if isinstance(exc, ClientError):
        code = exc.response.get("Error", {}).get("Code")
        if code:
            return str(code)
    return type(exc).__name__


def log_secret_error(kind: SecretErrorKind, code: str) -> None:
    """Log a classified secret failure with its diagnostic."""
    if kind is SecretErrorKind.UNRECOGNIZED:
        logger.error(
            f"Unrecognized error: {code}",
            extra={"error_code": code, "error_kind": kind.name},
        )
        return
    logger.error(
        f"Failed with {code}: {kind.diagnostic}",
        extra={"error_code": code, "error_kind": kind.name},
    )


def extract_token(response: Mapping[str, Any]) -> str:
    """Read the token from a GetSecretValue response.

    ``SecretString`` wins when present; otherwise ``SecretBinary`` is
    base64-decoded and read as ASCII JSON.

    Raises:
        ValueError: If neither payload carries a ``Token`` field.
    """
    secret_str = response.get("SecretString")
    if not secret_str and response.get("SecretBinary"):
        secret_str = base64.b64decode(response["SecretBinary"]).decode("ascii")
    if not secret_str:
        raise ValueError("Secret value is empty")

    payload = json.loads(secret_str)
    token = payload.get(TOKEN_FIELD) if isinstance(payload, dict) else None
    if not isinstance(token, str):
        raise ValueError(f"Secret payload has no {TOKEN_FIELD} field")
    return token


class SecretsManagerCredentialProvider:
    """Credential provider backed by a single Secrets Manager secret."""

    def __init__(self, secret_id: str, region_name: Optional[str] = None):
        self.secret_id = secret_id
        self.region_name = region_name

    def get_token(self) -> str:
        """Fetch the secret and return its token.

        Raises:
            ClientError, BotoCoreError: The secret store failure, re-raised
                unchanged after it is classified and logged.
            SecretRetrievalError: If the payload carries no usable token.
        """
        client = get_secretsmanager_client(self.region_name)
        try:
            response = client.get_secret_value(SecretId=self.secret_id)
        except (ClientError, BotoCoreError) as exc:
            code = error_code(exc)
            kind = SecretErrorKind.from_code(code)
            log_secret_error(kind, code)
            raise

        try:
            return extract_token(response)
        except (ValueError, UnicodeDecodeError) as exc:
            # json.JSONDecodeError and binascii.Error are ValueErrors
            code = type(exc).__name__
            log_secret_error(SecretErrorKind.UNRECOGNIZED, code)
            raise SecretRetrievalError(SecretErrorKind.UNRECOGNIZED, code) from exc
