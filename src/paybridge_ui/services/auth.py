"""Admin login."""

from paybridge_ui.errors import ApiError
from paybridge_ui.lib import logs
from paybridge_ui.models.common import LoginResult
from paybridge_ui.services.api_client import BackendClient

LOG = logs.logger(__file__)

MISSING_CREDENTIALS = "Username and password are required."
INVALID_CREDENTIALS = "Invalid credentials"
LOGIN_FAILED = "Login failed. Please try again."


async def authenticate(
    client: BackendClient, username: str, password: str
) -> LoginResult:
    """
    Submit credentials to the backend.

    Never raises: empty fields, rejected credentials and transport errors
    all come back as an unsuccessful LoginResult with a display message.
    The backend's own message is passed through verbatim.
    """
    username = username.strip()
    if not username or not password:
        return LoginResult(success=False, message=MISSING_CREDENTIALS)
    try:
        result = await client.login(username, password)
    except ApiError as exc:
        LOG.error("Login request failed: %s", exc, exc_info=True)
        return LoginResult(success=False, message=LOGIN_FAILED)
    if not result.success and not result.message:
        result.message = INVALID_CREDENTIALS
    LOG.info("Login for %s: success=%s", username, result.success)
    return result
