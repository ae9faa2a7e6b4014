"""Uri helpers"""
from urllib import parse

__all__ = ["join", "https_url"]


def join(*parts: str) -> str:
    """Join uri parts."""
    if not parts:
        return ""

    return parse.urljoin(parts[0], "/".join(part.strip("/") for part in parts[1:]))


def https_url(host: str, *parts: str) -> str:
    """Build an https url on a bare host, e.g. an Akamai api host."""
    host = host.strip().strip("/")
    if not host or "/" in host:
        raise ValueError(f"Invalid host: {host!r}")
    return join(f"https://{host}/", *parts)
