class Undefined:
    """ Utilize this singleton when you need to disambiguate between a prop which is set as None vs. a prop which has not been set at all.
    NOTE: This is currently used in:
        - HtmlAttr (both None and UNDEFINED values are omitted from the markup)
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNDEFINED"

    def __bool__(self):
        return False

UNDEFINED = Undefined()
