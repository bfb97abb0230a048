# =============================================================================
# DAMAGE FORMULA
# =============================================================================
BATTLE_LEVEL = 50  # Fixed level for every combatant, not configurable
LEVEL_FACTOR = (2 * BATTLE_LEVEL + 10) / 250  # 0.44
BASE_DAMAGE_BONUS = 2

STAB_MULTIPLIER = 1.5  # Same-type attack bonus
NO_STAB_MULTIPLIER = 1.0

CRITICAL_HIT_CHANCE = 1 / 16
CRITICAL_HIT_MULTIPLIER = 1.5

DAMAGE_ROLL_MIN = 0.85
DAMAGE_ROLL_MAX = 1.00

# =============================================================================
# TYPE EFFECTIVENESS MULTIPLIERS
# =============================================================================
TYPE_MUL_NO_EFFECT = 0.0
TYPE_MUL_NOT_EFFECTIVE = 0.5
TYPE_MUL_NORMAL = 1.0
TYPE_MUL_SUPER_EFFECTIVE = 2.0

# =============================================================================
# OPPONENT AI
# =============================================================================
AI_JITTER_MIN = 0.8
AI_JITTER_MAX = 1.2
AI_EXPLORATION_RATE = 0.2  # Chance to ignore the ranking and pick at random

# =============================================================================
# COMBATANT LIMITS
# =============================================================================
MAX_MON_MOVES = 4
MAX_MON_TYPES = 2
HP_MULTIPLIER = 2  # maxHP = floor(baseHP * HP_MULTIPLIER)
FIRST_TURN = 1

# =============================================================================
# STRUGGLE - used when a side has no move with remaining PP
# =============================================================================
STRUGGLE_MOVE_ID = -1
STRUGGLE_NAME = "Struggle"
STRUGGLE_TYPE = "normal"
STRUGGLE_POWER = 40
STRUGGLE_ACCURACY = 100
STRUGGLE_PP = 1

# =============================================================================
# CATALOG DEFAULTS - applied when a move payload leaves a field out
# =============================================================================
DEFAULT_MOVE_POWER = 0
DEFAULT_MOVE_ACCURACY = 100
DEFAULT_MOVE_PP = 10

# =============================================================================
# HEALTH BAR THRESHOLDS (percent of max HP)
# =============================================================================
HEALTH_BAR_GREEN_THRESHOLD = 50
HEALTH_BAR_YELLOW_THRESHOLD = 20

# =============================================================================
# BATTLE MESSAGES
# =============================================================================
MSG_NO_EFFECT = "It has no effect..."
MSG_NOT_VERY_EFFECTIVE = "It's not very effective..."
MSG_SUPER_EFFECTIVE = "It's super effective!"
MSG_CRITICAL_HIT = "A critical hit!"
