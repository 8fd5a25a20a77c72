class InvalidArgumentError(ValueError):
    def __init__(self, msg: str) -> None:
        super().__init__("Invalid argument: " + msg)
