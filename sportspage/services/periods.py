"""Period labels for box score headers."""


def _hockey(i: int) -> str:
    if i <= 3:
        return f"P{i}"
    return "OT" if i == 4 else f"OT{i - 3}"


def _basketball(i: int) -> str:
    if i <= 4:
        return f"Q{i}"
    return "OT" if i == 5 else f"OT{i - 4}"


def _football(i: int) -> str:
    return f"Q{i}" if i <= 4 else "OT"


def _soccer(i: int) -> str:
    if i <= 2:
        return f"{i}H"
    return str(i)


_LABELERS = {
    "hockey": _hockey,
    "basketball": _basketball,
    "football": _football,
    "soccer": _soccer,
}


def labels(sport: str, period_count: int) -> list[str]:
    """Header labels for periods 1..period_count.

    Unknown sports (baseball innings included) use the period number.

    Examples:
        labels("hockey", 5) -> ["P1", "P2", "P3", "OT", "OT2"]
        labels("football", 6) -> ["Q1", "Q2", "Q3", "Q4", "OT", "OT"]
    """
    labeler = _LABELERS.get(sport, str)
    return [labeler(i) for i in range(1, period_count + 1)]
