"""
File: validators.py
Purpose: Request-body validation and sanitization (trim, HTML-escape, email normalization).

Every route builds a BodyValidator over the request body, declares its fields,
and calls validate(): either the sanitized values come back as a dict, or a
ValidationError carrying one error entry per failing field is raised.
"""
from email_validator import EmailNotValidError, validate_email
from markupsafe import escape

from hotel.errors import ValidationError
from hotel.utils.dates import parse_iso_date

DEFAULT_MESSAGE = "Invalid value"

# --- Email provider rules ---
GMAIL_DOMAINS = {"gmail.com", "googlemail.com"}
PLUS_TAG_DOMAINS = {
    "outlook.com", "hotmail.com", "live.com",
    "icloud.com", "me.com",
}
YAHOO_DOMAINS = {"yahoo.com", "yahoo.es", "yahoo.co.uk", "ymail.com", "rocketmail.com"}

TRUE_VALUES = {"true", "1"}
FALSE_VALUES = {"false", "0"}


def normalize_email(address):
    """
    Canonical form of an already-valid address: lowercased, with provider
    sub-addressing removed (gmail also ignores dots in the local part).
    """
    local, _, domain = address.rpartition("@")
    local = local.lower()
    domain = domain.lower()

    if domain in GMAIL_DOMAINS:
        local = local.split("+", 1)[0].replace(".", "")
        domain = "gmail.com"
    elif domain in PLUS_TAG_DOMAINS:
        local = local.split("+", 1)[0]
    elif domain in YAHOO_DOMAINS:
        local = local.rsplit("-", 1)[0]

    return f"{local}@{domain}"


def _as_text(value):
    """Scalars are validated as their string form; containers are rejected."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


class BodyValidator:
    """Collects sanitized values and field errors for one request body."""

    def __init__(self, body):
        self.body = body if isinstance(body, dict) else {}
        self.data = {}
        self.errors = []

    def is_present(self, field):
        return self.body.get(field) is not None

    def add_error(self, field, message):
        self.errors.append({
            "type": "field",
            "value": self.body.get(field),
            "msg": message,
            "path": field,
            "location": "body",
        })

    # =================================================================
    # Field rules
    # =================================================================

    def text(self, field, message=DEFAULT_MESSAGE, required=True, allow_empty=False):
        """Trimmed, HTML-escaped string. Absent optional fields become None."""
        if not self.is_present(field):
            if required:
                self.add_error(field, message)
            self.data[field] = None
            return self

        value = _as_text(self.body[field])
        if value is None:
            self.add_error(field, message)
            return self

        value = value.strip()
        if not value and not allow_empty:
            self.add_error(field, message)
            return self

        self.data[field] = str(escape(value))
        return self

    def email(self, field, message=DEFAULT_MESSAGE, required=True):
        """Syntactically valid email address, stored in normalized form."""
        if not self.is_present(field):
            if required:
                self.add_error(field, message)
            self.data[field] = None
            return self

        value = _as_text(self.body[field])
        try:
            validated = validate_email((value or "").strip(), check_deliverability=False)
        except EmailNotValidError:
            self.add_error(field, message)
            return self

        self.data[field] = normalize_email(validated.normalized)
        return self

    def boolean(self, field, message=DEFAULT_MESSAGE):
        """Accepts true/false/1/0 (native or as strings) and coerces to bool."""
        value = _as_text(self.body.get(field))
        if value in TRUE_VALUES:
            self.data[field] = True
        elif value in FALSE_VALUES:
            self.data[field] = False
        else:
            self.add_error(field, message)
        return self

    def iso_date(self, field, message=DEFAULT_MESSAGE):
        """ISO-8601 date (or date-time), stored as a datetime.date."""
        parsed = parse_iso_date(self.body.get(field))
        if parsed is None:
            self.add_error(field, message)
        else:
            self.data[field] = parsed
        return self

    def date_after(self, field, other_field, message):
        """Cross-field rule: `field` must be strictly later than `other_field`."""
        start = self.data.get(other_field)
        end = self.data.get(field)
        if start is None or end is None:
            return self
        if end <= start:
            self.add_error(field, message)
        return self

    def validate(self):
        """Returns the sanitized data or raises ValidationError."""
        if self.errors:
            raise ValidationError(self.errors)
        return self.data
