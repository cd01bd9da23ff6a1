"""Priority color resolution."""

from todaywidget.models.task import PriorityColor

# Indexed by priority - 1
PRIORITY_PALETTE: tuple[PriorityColor, ...] = (
    PriorityColor.URGENT,
    PriorityColor.HIGH,
    PriorityColor.NORMAL,
    PriorityColor.FALLBACK,
)


def resolve_priority_color(priority: int) -> PriorityColor:
    """Return the color for a priority level.

    Priorities outside 1-4 fall back to ``PriorityColor.FALLBACK`` without
    raising or logging.
    """
    if priority < 1 or priority > len(PRIORITY_PALETTE):
        return PriorityColor.FALLBACK
    return PRIORITY_PALETTE[priority - 1]
