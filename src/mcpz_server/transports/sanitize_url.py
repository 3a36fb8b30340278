"""Masking of secret query parameters for safe logging."""

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

SECRET_PARAMS = frozenset({"secret", "oauth_token", "api_key", "token", "password", "pw"})


def sanitize_url(url: str) -> str:
    """Replace secret query parameter values with ``***``.

    Example:
        sanitize_url("http://localhost:3000/mcp?oauth_token=secret-123")
        # => 'http://localhost:3000/mcp?oauth_token=***'

    Anything that is not an absolute URL is returned unchanged.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return url
    if not parts.scheme or not parts.netloc:
        return url

    params = parse_qsl(parts.query, keep_blank_values=True)
    if not any(key in SECRET_PARAMS for key, _ in params):
        return url

    masked = [(key, "***" if key in SECRET_PARAMS else value) for key, value in params]
    return urlunsplit(parts._replace(query=urlencode(masked, safe="*")))
