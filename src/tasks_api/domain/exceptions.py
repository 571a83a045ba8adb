class InvalidTaskStatusError(ValueError):
    """Raised when storage holds a status literal outside the TaskStatus domain."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown task status {value!r}.")
        self.value = value
