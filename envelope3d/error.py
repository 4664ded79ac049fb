class EnvelopeError(Exception):
    """
    Raised when an envelope cannot be built from, or checked against, its input
    """

    def __init__(self, value):
        self.value = value

    def __str__(self):
        return repr(self.value)
