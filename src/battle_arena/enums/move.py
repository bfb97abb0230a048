from enum import Enum


class MoveCategory(str, Enum):
    """Damage class of a move - decides which attack/defense stats are used"""

    PHYSICAL = "physical"
    SPECIAL = "special"
    STATUS = "status"
