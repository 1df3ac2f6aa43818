UNITS: list[tuple[str, int]] = [
    ("B", 1),
    ("KB", 1024),
    ("MB", 1024**2),
    ("GB", 1024**3),
]


def pad_float(number: float = 0.0, round_int: bool = False) -> str:
    """
    Pad a float to two decimal places.
    """
    if isinstance(number, int) and round_int:
        return str(int(number))
    else:
        return f"{number:.2f}"


def select_unit(number: int) -> tuple[float, str]:
    """
    Pick the display unit for a byte count and return the scaled value with it.
    A unit is promoted once the value reaches 1000 of it, but the divisor is 1024.
    """
    for unit, divisor in UNITS:
        if number < 1000 * divisor:
            return number / divisor, unit
    return number / 1024**4, "TB"


def fit_float(value: float, budget: int, trim_trailing_zeros: bool = True) -> str:
    """
    Render a float in at most `budget` characters when its integer part allows it.

    The value is first rendered at `budget` decimals to find its integer part.
    If there is no room left for a dot and a fractional digit, only the integer
    part is returned. Otherwise the value is re-rendered with whatever precision
    remains, optionally dropping trailing zeros and a trailing dot.
    """
    rendered = f"{value:.{max(budget, 0)}f}"
    integer = rendered.split(".")[0]

    # 1 is for the decimal dot
    if len(integer) + 1 >= budget:
        return integer

    precision = budget - len(integer) - 1
    rendered = f"{value:.{precision}f}"
    if len(rendered) > budget:
        # rounding carried into a new integer digit, e.g. 9.999 -> 10.00
        rendered = f"{value:.{precision - 1}f}"

    if trim_trailing_zeros and "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")

    return rendered


def format_bytes(number: int, fixed_width: bool = True, width_budget: int = 6) -> str:
    """
    Convert a byte count to a compact string such as 0.977KB or 12.4MB.
    """
    value, unit = select_unit(number)
    if fixed_width:
        value_str = fit_float(value, width_budget - len(unit))
    else:
        value_str = pad_float(number=value, round_int=False)

    return f"{value_str}{unit}"


def format_percent(number: float, width_budget: int = 4) -> str:
    """
    Percentages are always width fitted and keep their trailing zeros,
    so the column keeps its width across refreshes.
    """
    return fit_float(number, width_budget, trim_trailing_zeros=False)
