class UnsupportedTypeError(Exception):
    """ Raised when a payload references a type with no registered strategy.
    The whole mount/render call is aborted before anything is loaded. """

    def __init__(self, type_: str | None):
        self.type = type_
        if type_ is None:
            self.message = "Payload does not declare a string 'type' field."
        else:
            self.message = f"Unsupported type '{type_}'."
        super().__init__(self.message)
