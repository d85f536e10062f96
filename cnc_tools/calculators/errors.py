"""Input errors raised by the BOM calculators before any section is computed."""


class CalculatorInputError(ValueError):
    """A single problem with one input field."""

    code = "invalid_input"

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__("%s: %s" % (field, message))

    def to_dict(self) -> dict:
        return {"field": self.field, "code": self.code, "message": self.message}


class InvalidDimension(CalculatorInputError):
    """A length, width, height or thickness that is not a finite size within range."""

    code = "invalid_dimension"


class InvalidDoorType(CalculatorInputError):
    """A door type outside STANDARD / BIFOLD / AWNING."""

    code = "invalid_door_type"


class BOMValidationError(ValueError):
    """Every input problem found in one request, reported together."""

    def __init__(self, errors: list) -> None:
        self.errors = list(errors)
        super().__init__(
            "Invalid BOM request: %s" % "; ".join(str(e) for e in self.errors)
        )

    @property
    def fields(self) -> list:
        return [e.field for e in self.errors]
