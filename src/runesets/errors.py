class InvalidArgumentError(ValueError):
    """Raised for sampling arguments no draw can satisfy."""


class UnknownCharsetError(KeyError):
    def __init__(self, name: str, valid_names: list[str]):
        self.name = name
        self.valid_names = valid_names
        super().__init__(name)

    def __str__(self) -> str:
        return (
            f"unknown charset '{self.name}'; "
            f"valid: {', '.join(self.valid_names)}"
        )
