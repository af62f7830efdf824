"""Url list splitting, environment interpolation and preview-deploy rewriting."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)


def split_url_list(raw_urls: str | None, separator: str = "\n") -> list[str]:
    """Split a multi-line input into trimmed urls; blank input yields no urls."""
    if not raw_urls:
        return []
    return [url.strip() for url in raw_urls.split(separator)]


def substitute_environment(url: str, environ: Mapping[str, str]) -> str:
    """Replace `$NAME` occurrences with environment values.

    Every variable whose name occurs anywhere in the url gets its first `$NAME`
    replaced, in the iteration order of `environ`. Names that are prefixes of
    other names can therefore consume part of a longer reference
    (`$FOOBAR` becomes `<FOO>BAR` when `FOO` is visited first).
    """
    if "$" not in url:
        return url
    for name, value in environ.items():
        if name in url:
            url = url.replace(f"${name}", value, 1)
    return url


def branch_from_ref(ref: str | None) -> str | None:
    """Return the third segment of a git ref such as `refs/heads/<branch>`."""
    segments = (ref or "").split("/")
    if len(segments) < 3:
        return None
    return segments[2] or None


def rewrite_to_preview_origin(url: str, origin: str) -> str:
    """Keep only the path and query of `url` and graft them onto `origin`."""
    parts = urlsplit(url)
    path = parts.path or "/"
    if not path.startswith("/"):
        path = f"/{path}"
    if parts.query:
        path = f"{path}?{parts.query}"
    return f"{origin}{path}"


def interpolate_urls(
    urls: Sequence[str],
    *,
    environ: Mapping[str, str],
    ref: str | None = None,
    netlify_site: str | None = None,
) -> list[str]:
    """Interpolate environment values and, for Netlify previews, rewrite every origin."""
    substituted = [substitute_environment(url, environ) for url in urls]

    branch = branch_from_ref(ref)
    if branch and netlify_site:
        origin = f"https://{branch}--{netlify_site}"
        rewritten = [rewrite_to_preview_origin(url, origin) for url in substituted]
        logger.debug("Rewrote urls to preview origin %s: %s", origin, rewritten)
        return rewritten

    logger.debug("Interpolated urls: %s", substituted)
    return substituted
