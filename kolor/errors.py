class InvalidColorFormatError(ValueError):
    """Raised when a string cannot be parsed as a CSS hex color."""

    def __init__(self, text: object) -> None:
        self.text = text
        super().__init__(f"Invalid input format: {text!r} (expected '#rgb' or '#rrggbb')")
