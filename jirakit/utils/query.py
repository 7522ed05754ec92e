import httpx
from pydantic import BaseModel


def encode_query(options: BaseModel | None) -> str:
    """Encode an options record as a key-sorted query string.

    Only fields that differ from their default (``None``) are emitted, under
    their declared parameter names. An explicit ``0`` or ``""`` is sent.
    Booleans become "true"/"false" and lists repeat the key.
    """
    if options is None:
        return ""

    data = options.model_dump(mode="json", by_alias=True, exclude_none=True)
    items: list[tuple[str, object]] = []
    for key in sorted(data):
        value = data[key]
        if isinstance(value, list):
            items.extend((key, item) for item in value)
        else:
            items.append((key, value))
    return str(httpx.QueryParams(items))


def add_options(path: str, options: BaseModel | None) -> str:
    """Append the encoded options to ``path``, keeping any query it already has."""
    query = encode_query(options)
    if not query:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{query}"
