"""Time-budget policies: root sample size and adaptive search depth."""


def sample_size_for_board(size: int) -> int:
    if size <= 5:
        return 30
    if size <= 8:
        return 20
    return 10


def select_depth(time_left_ms: float, total_time_ms: float, current_depth: int) -> int:
    """Map the remaining game clock to a search depth.

    Thresholds are checked tightest first. Above half the budget the current
    depth is kept as is. Called fresh every turn, so depth can go back up if
    the clock reports more time than on an earlier turn.
    """
    if time_left_ms < total_time_ms / 20:
        return 0
    if time_left_ms < total_time_ms / 10:
        return 1
    if time_left_ms < total_time_ms / 4:
        return 3
    if time_left_ms < total_time_ms / 2:
        return 5
    return current_depth
