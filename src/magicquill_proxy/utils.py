PNG_DATA_URL_PREFIX = "data:image/png;base64,"


def to_png_data_url(img_b64: str) -> str:
    """
    Wrap a raw base64 PNG payload in a data URL.
    """
    return f"{PNG_DATA_URL_PREFIX}{img_b64}"


def is_blank(value) -> bool:
    """
    Check if a request field is missing or an empty string.
    """
    return value is None or value == ""


def summarize_payload(value):
    """
    Replace long strings (embedded images) with their length so payloads can be logged.
    """
    if isinstance(value, dict):
        return {key: summarize_payload(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [summarize_payload(item) for item in value]
    if isinstance(value, str) and len(value) > 64:
        return f"<{len(value)} chars>"
    return value
