class InvalidEncodingError(ValueError):
    """
    Raised by strict decoding when a byte sequence is not valid utf-8. The
    position attribute is the offset of the first offending byte.
    """

    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position
