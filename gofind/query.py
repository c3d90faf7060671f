from urllib.parse import urlencode


def build_query(terms):
    """Join search terms with spaces, quoting any term that contains whitespace."""
    parts = []
    for term in terms:
        if any(ch.isspace() for ch in term):
            parts.append(f'"{term}"')
        else:
            parts.append(term)
    return " ".join(parts)


def encode_query(terms):
    """Return the form-encoded ``q`` parameter for ``terms``."""
    return urlencode({"q": build_query(terms)})
