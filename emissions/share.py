"""
Shareable URLs: form field values <-> query string.

Only the submitted form values travel in the URL, never computed
results. Blank fields are omitted; field order follows the form.
"""

from urllib.parse import urlencode, parse_qsl, urlsplit, urlunsplit

from emissions.parsing import FORM_FIELDS, normalize_fields


def encode_query(fields):
    """
    Encode form fields as a query string.

    Parameters
    ----------
    fields : mapping
        Form values (form names or snake_case aliases).

    Returns
    -------
    str
        e.g. "distances=0%2C20000&ice-weight=1750"
    """
    fields = normalize_fields(fields)
    pairs = []
    for name in FORM_FIELDS:
        value = fields.get(name)
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = ",".join(str(v) for v in value)
        value = str(value).strip()
        if value:
            pairs.append((name, value))
    return urlencode(pairs)


def decode_query(query):
    """
    Read known form fields back out of a query string.

    Unknown parameters are ignored; if a field repeats, the last
    occurrence wins.
    """
    if query.startswith("?"):
        query = query[1:]
    return known_fields(parse_qsl(query, keep_blank_values=False))


def known_fields(pairs):
    """
    Keep non-blank form fields from (key, value) pairs or a mapping.

    Accepts already-decoded request arguments (e.g. flask request.args).
    """
    if hasattr(pairs, "items"):
        pairs = pairs.items()
    known = set(FORM_FIELDS)
    fields = {}
    for key, value in pairs:
        if key in known and value.strip():
            fields[key] = value
    return fields


def share_url(base_url, fields):
    """Append the encoded form state to base_url, replacing any query."""
    scheme, netloc, path, _query, _fragment = urlsplit(base_url)
    return urlunsplit((scheme, netloc, path, encode_query(fields), ""))
