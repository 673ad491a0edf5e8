"""Base library exception."""


class TrueLayerException(Exception):
    """
    Base exception for all errors raised by the client.

    Every subclass carries a stable upper-snake ``code`` so callers can
    branch on the condition without matching messages.
    """

    def __init__(self, message: str, code: str = "TRUELAYER_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
