"""Exception types raised inside xec-send.

Validators and converters report problems through result objects; these are
only raised at internal boundaries (address decoding, submission guards).
"""


class SendError(Exception):
    """Base class for xec-send errors."""


class InvalidAddressError(SendError):
    pass


class PriceUnavailableError(SendError):
    pass


class FormNotSubmittableError(SendError):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
