"""Trust ``X-Forwarded-*`` headers from a known number of reverse proxies."""

from __future__ import annotations

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix


def init_app(app: Flask) -> None:
    """Wrap the WSGI app in :class:`ProxyFix` when ``USE_PROXYFIX`` is on.

    ``PROXYFIX_HOPS`` is the number of proxies in front of gunicorn. With
    ``0`` the forwarded headers are ignored, same as disabling the flag.
    """
    hops = int(app.config.get("PROXYFIX_HOPS", 1))
    if not app.config.get("USE_PROXYFIX", True) or hops <= 0:
        return
    app.wsgi_app = ProxyFix(  # type: ignore[method-assign]
        app.wsgi_app, x_for=hops, x_proto=hops, x_host=hops, x_port=hops, x_prefix=hops
    )
