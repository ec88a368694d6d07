"""Token lookup for the inference endpoint.

Tokens are resolved the way the ``gh`` CLI resolves them: environment
variables first, then ``gh auth token`` for the host.
"""

import logging
import os
import shutil
import subprocess

from ghmodels.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

GITHUB_HOST = "github.com"
GITHUB_TOKEN_VARS = ("GH_TOKEN", "GITHUB_TOKEN")
ENTERPRISE_TOKEN_VARS = ("GH_ENTERPRISE_TOKEN", "GITHUB_ENTERPRISE_TOKEN")


def _token_from_env(host: str) -> str | None:
    names = GITHUB_TOKEN_VARS if host == GITHUB_HOST else ENTERPRISE_TOKEN_VARS
    for name in names:
        value = os.environ.get(name, "").strip()
        if value:
            logger.debug(f"Using token from {name}")
            return value
    return None


def _token_from_gh(host: str) -> str | None:
    gh = shutil.which("gh")
    if gh is None:
        return None

    result = subprocess.run(
        [gh, "auth", "token", "--hostname", host],
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        logger.debug(f"gh auth token failed for {host}: {result.stderr.strip()}")
        return None

    token = result.stdout.strip()
    return token or None


def token_for_host(host: str = GITHUB_HOST) -> str:
    """Return an auth token for the given host.

    Raises:
        AuthenticationError: If no token is configured for the host
    """
    token = _token_from_env(host) or _token_from_gh(host)
    if not token:
        raise AuthenticationError(
            f"no token found for {host}; set GH_TOKEN or run `gh auth login`"
        )
    return token
