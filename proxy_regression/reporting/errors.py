# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""HTML formatting of request errors.

Turns an exception (or a RequestFailure) into an escaped HTML fragment
listing the error and every exception in its cause chain, so it can be
embedded in the error report as-is.
"""

from markupsafe import Markup

from proxy_regression.core.types import RequestFailure

# Guards against cyclic __context__ chains
_MAX_CHAIN_DEPTH = 10


def _iter_error_chain(error: BaseException) -> list[BaseException]:
    chain: list[BaseException] = []
    current: BaseException | None = error
    while (
        current is not None
        and current not in chain
        and len(chain) < _MAX_CHAIN_DEPTH
    ):
        chain.append(current)
        current = current.__cause__ or current.__context__
    return chain


def _format_error_item(error: BaseException) -> Markup:
    message = str(error) or "(no message)"
    return Markup("<li><code>{}</code>: {}</li>").format(type(error).__name__, message)


def err_html(error: BaseException | RequestFailure) -> str:
    """Render an error as an HTML fragment.

    Args:
        error: The exception raised by a check, or the RequestFailure
            returned by the request handler.

    Returns:
        HTML markup with all user-controlled text escaped.

    Example:
        >>> err_html(ValueError("bad <value>"))
        '<ul class="error-chain"><li><code>ValueError</code>: bad &lt;value&gt;</li></ul>'
    """
    header = Markup("")
    if isinstance(error, RequestFailure):
        header = Markup('<p class="error-detail">{} ({})</p>').format(
            error.detail or "Request failed", error.kind.value
        )
        error = error.error

    items = Markup("").join(_format_error_item(e) for e in _iter_error_chain(error))
    return str(header + Markup('<ul class="error-chain">{}</ul>').format(items))
