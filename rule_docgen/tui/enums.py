from enum import Enum

from rule_docgen.models import ActionStatus


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


ACTION_STATUS_STYLE = {
    ActionStatus.UPDATE: UIStyle.YELLOW.value,
    ActionStatus.NOOP: UIStyle.DIM.value,
}
