"""
Datastar action expressions for the counter routes.

The page binds buttons to `@post('/counter/<action>')` expressions; the
FastHTML adapter registers handlers on the same paths.
"""

import urllib.parse

BASE_PATH = "/counter"

INCREMENT = "increment"
DECREMENT = "decrement"
RESET = "reset"
TOGGLE = "toggle"
OPEN_SETTINGS = "settings/open"
CLOSE_SETTINGS = "settings/close"
SAVE_SETTINGS = "settings/save"
INTERVAL = "interval"
LIVE = "live"


def action_path(name: str) -> str:
    return f"{BASE_PATH}/{name}"


def datastar_action(name: str, method: str = "post", expression: str = None, **params) -> str:
    """
    Build a Datastar backend action such as `@post('/counter/increment')`.

    `params` are url-encoded into the query string. `expression` is a raw
    JavaScript expression appended to the url, for values only known in the
    browser (e.g. a slider signal).
    """
    url = action_path(name)
    if params:
        url += "?" + urllib.parse.urlencode(params)
    if expression:
        return f"@{method}('{url}' + {expression})"
    return f"@{method}('{url}')"
