"""
Renders priming results as inline ``<script>`` fragments.
"""

from jinja2.utils import htmlsafe_json_dumps
from markupsafe import Markup

from primecache.domain.value_objects.prime_result import PrimeResult

CACHE_GLOBAL = "window.__preCachedResponses"

_JSON_SEPARATORS = (",", ":")


def to_script_json(value) -> Markup:
    """Compact JSON that cannot terminate an enclosing ``<script>`` element."""
    return htmlsafe_json_dumps(value, separators=_JSON_SEPARATORS)


def render_prime_script(result: PrimeResult) -> Markup:
    """Render ``result`` as a cache-seeding script, or empty markup for failures."""
    if not result.ok:
        return Markup("")

    entry = {"statusCode": result.status_code, "body": result.body}
    return Markup(
        "<script>{cache}={cache}||{{}},{cache}[{key}]={entry};</script>"
    ).format(
        cache=Markup(CACHE_GLOBAL),
        key=to_script_json(result.url),
        entry=to_script_json(entry),
    )
