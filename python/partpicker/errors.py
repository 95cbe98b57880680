"""Part picker exceptions with contextual error messages."""


class PartPickerError(Exception):
    """Base exception for all part picker errors."""


class CatalogError(PartPickerError):
    def __init__(self, message: str, part_id: int | None = None):
        self.part_id = part_id
        full_message = message
        if part_id is not None:
            full_message += f"\n\n  Part id: {part_id}"
        super().__init__(full_message)


class FormDataError(PartPickerError):
    """Posted selection form could not be turned into view models."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        full_message = message
        if field:
            full_message += f"\n\n  Field: {field}"
        super().__init__(full_message)


class ConfigurationError(PartPickerError):
    """A named policy, mode or setting does not exist."""

    def __init__(self, message: str, name: str | None = None, choices=None):
        self.name = name
        self.choices = list(choices or [])

        full_message = message
        if name is not None:
            full_message += f"\n\n  Got: {name!r}"
        if self.choices:
            full_message += "\n\n  Expected one of:"
            for choice in self.choices:
                full_message += f"\n    - {choice}"

        super().__init__(full_message)
