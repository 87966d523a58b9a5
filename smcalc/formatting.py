def format_number(value: float) -> str:
    """Fixed six decimals with trailing zeros and a bare point removed.

    >>> format_number(10.0), format_number(10.5), format_number(1 / 3)
    ('10', '10.5', '0.333333')
    """
    text = f"{value:.6f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
