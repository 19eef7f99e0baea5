class SetupError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class EmptyTypeError(SetupError):
    """ Raised when a strategy is constructed with a blank type tag. """

    def __init__(self, type_: object = None):
        self.type = type_
        super().__init__(f"Strategy type must be a non-empty string, got {type_!r}.")


class DuplicateTypeError(SetupError):
    """ Raised when registering a type tag that is already present in a registry. """

    def __init__(self, type_: str):
        self.type = type_
        super().__init__(f"Type '{type_}' is already registered.")


class TypeNotFoundError(SetupError):
    """ Raised when updating or unregistering a type tag that is not in a registry. """

    def __init__(self, type_: str):
        self.type = type_
        super().__init__(f"Type '{type_}' is not registered.")
