"""Anti-forgery token extraction from the Smartschool login page."""

from bs4 import BeautifulSoup

try:
    import lxml  # noqa: F401 – used as BeautifulSoup parser backend
    _BS4_PARSER = "lxml"
except ImportError:
    _BS4_PARSER = "html.parser"

from ..config import TOKEN_FIELD
from ..errors import MISSING_LOGIN_TOKEN, ProtocolError


def extract_login_token(html: str, field_name: str = TOKEN_FIELD) -> str:
    """
    Return the value of the hidden ``<input name=field_name>`` of the login form.

    Raises ProtocolError(missing_login_token) when the field is absent or
    empty, which means the login page layout has changed.
    """
    soup = BeautifulSoup(html, _BS4_PARSER)
    field = soup.find("input", attrs={"name": field_name})
    if field is None:
        raise ProtocolError(
            MISSING_LOGIN_TOKEN,
            f"Login page has no <input name={field_name!r}>; "
            "the platform's login form has probably changed",
        )
    token = (field.get("value") or "").strip()
    if not token:
        raise ProtocolError(
            MISSING_LOGIN_TOKEN,
            f"Login form field {field_name!r} carries no value",
        )
    return token
