def mask_value(value):
    """Mask an email or token before it reaches the logs."""
    if not isinstance(value, str) or not value:
        return value
    if "@" in value:
        name, _, domain = value.partition("@")
        return (name[:2] + "***@" + domain) if name else "***@" + domain
    if len(value) > 12:
        return value[:4] + "..." + value[-4:]
    return "***"
