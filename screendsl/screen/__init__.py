"""Screen planner - ordering, chrome slots and dispatch for one page.

Example usage:
    >>> from screendsl.screen import plan_screen
    >>> plan = plan_screen([{"component": "text_block"}, {"component": "header"}])
    >>> plan.components
    ['header', 'text_block']
"""

from .lib import PlannedSection, ScreenPlan, normalize_page_name, plan_screen

__all__ = [
    "PlannedSection",
    "ScreenPlan",
    "normalize_page_name",
    "plan_screen",
]
