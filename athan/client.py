import http.client
import json
import logging
import urllib.error
import urllib.request

from .errors import DecodeError, NetworkError, RemoteError

logger = logging.getLogger(__name__)

USER_AGENT = "athan-cli/1.0"


def fetch_json(url, timeout=None, label="HTTP"):
    """GET url and decode the JSON body.

    A timeout of None leaves the socket default in place.
    """
    req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    kwargs = {} if timeout is None else {"timeout": timeout}
    try:
        with urllib.request.urlopen(req, **kwargs) as resp:
            status = resp.status
            reason = resp.reason
            body = resp.read()
    except urllib.error.HTTPError as exc:
        body = exc.read() if exc.fp is not None else b""
        raise _remote_error(label, exc.code, exc.reason, body) from exc
    except (urllib.error.URLError, http.client.HTTPException, OSError) as exc:
        raise NetworkError(f"{label} request failed: {exc}") from exc

    logger.debug("%s response: %s %s (%d bytes)", label, status, reason, len(body))
    if status != 200:
        raise _remote_error(label, status, reason, body)

    try:
        return json.loads(body)
    except ValueError as exc:
        raise DecodeError(f"failed to decode {label} JSON: {exc}") from exc


def _remote_error(label, status, reason, body):
    text = body.decode("utf-8", errors="replace")
    return RemoteError(
        f"{label} request returned status: {status} {reason}, body: {text}",
        status=status,
        body=text
    )
