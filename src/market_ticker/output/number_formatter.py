def format_grouped(value: float, separator: str = ",", decimals: int = 0) -> str:
    """Render ``value`` with ``decimals`` fraction digits and a grouped integer part.

    Runs of three digits are counted from the right of the integer part, so the
    leading group holds one to three digits: ``1234567`` becomes ``1,234,567``.
    The sign stays attached to the leading group and the fraction is never
    grouped.
    """
    decimals = max(int(decimals), 0)
    rendered = "{0:.{1}f}".format(value, decimals)

    sign = ""
    if rendered.startswith("-"):
        sign, rendered = "-", rendered[1:]

    integer_part, _, fraction_part = rendered.partition(".")
    grouped = _group_digits(integer_part, separator)
    if decimals == 0:
        return sign + grouped
    return "{0}{1}.{2}".format(sign, grouped, fraction_part)


def format_percent_change(percentage_change: float, decimals: int = 1) -> str:
    return "{0:+.{1}f}%".format(percentage_change, max(int(decimals), 0))


def _group_digits(digits: str, separator: str) -> str:
    if not separator:
        return digits

    first_group = len(digits) % 3 or 3
    groups = [digits[:first_group]]
    for start in range(first_group, len(digits), 3):
        groups.append(digits[start:start + 3])
    return separator.join(groups)
