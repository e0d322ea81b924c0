"""Priority calculation — PRI = facility * 8 + severity."""


def compute_priority(facility: int, severity: int) -> int:
    """Combine facility (0-23) and severity (0-7) into a PRI value (0-191).

    Inputs must already be validated; see ``models.parse_facility`` and
    ``models.parse_severity``.
    """
    return int(facility) * 8 + int(severity)
