"""
Contact form relay.
Forwards the contact form fields, form-encoded, to the third-party form
service. Success is any 2xx answer; nothing is retried.
"""
import urllib.parse
import urllib.request

FIELDS = ("name", "email", "subject", "message")

TIMEOUT = 15  # seconds


def missing_fields(form) -> list[str]:
    return [f for f in FIELDS if not (form.get(f) or "").strip()]


def send(form, relay_url: str) -> bool:
    """POST the contact fields to *relay_url*. Returns True on a 2xx response.

    Raises:
        urllib.error.HTTPError: the relay answered 4xx / 5xx.
        urllib.error.URLError:  the relay could not be reached.
        ValueError:             *relay_url* is blank or malformed.
    """
    data = urllib.parse.urlencode({f: form.get(f, "") for f in FIELDS}).encode("utf-8")
    req  = urllib.request.Request(
        relay_url,
        data=data,
        method="POST",
        headers={
            "Accept":       "application/json",
            "Content-Type": "application/x-www-form-urlencoded",
        },
    )
    with urllib.request.urlopen(req, timeout=TIMEOUT) as resp:
        return 200 <= resp.status < 300
