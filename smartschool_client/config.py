"""Configuration constants for the Smartschool client."""

LOGIN_PATH = "/login"
API_ROOT   = "/mydoc/api/v1"
UPLOAD_API = "/upload/api/v1"
UPLOAD_FORM_PATH = "/Upload/Upload/Index"

REQUEST_TIMEOUT = 15    # seconds per HTTP request

# Login form field names, as rendered by the Symfony login page
TOKEN_FIELD    = "login_form[_token]"
USERNAME_FIELD = "login_form[_username]"
PASSWORD_FIELD = "login_form[_password]"

SESSION_COOKIE = "PHPSESSID"

# Fragments that only appear when the login form is rendered again.
# A successful login lands on the dashboard, which contains none of them.
_LOGIN_FAILURE_MARKERS = (
    'name="login_form[_password]"',
    "login-app__error",
)

# Keys of the JSON envelope some endpoints wrap their payload in:
#   {"success": true,  "data": {...}}
#   {"success": false, "error": "...", "code": "..."}
ENVELOPE_SUCCESS_KEY = "success"
ENVELOPE_DATA_KEY    = "data"
ENVELOPE_ERROR_KEYS  = ("error", "message", "msg")
ENVELOPE_CODE_KEYS   = ("code", "errorCode", "error_code")

# Truncation length for response bodies quoted in error messages
ERROR_BODY_PREVIEW = 200
