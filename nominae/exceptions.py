"""
Common exception definitions
"""


class InvalidRange(ValueError):
    """
    The requested name length bounds can not be satisfied. This is a
    programming error on the caller's side, so it is raised before any
    randomness is consumed.
    """
    def __init__(self, min_length, max_length, *args, **kwargs):
        super().__init__(min_length, max_length, *args, **kwargs)
        self.min_length = min_length
        self.max_length = max_length
        if min_length < 0 or max_length < 0:
            self.message = (
                f"Name lengths must not be negative: "
                f"{min_length}, {max_length}"
            )
        else:
            self.message = (
                f"min must be less than or equal to max: "
                f"{min_length} <= {max_length}"
            )

    def __str__(self):
        return self.message
