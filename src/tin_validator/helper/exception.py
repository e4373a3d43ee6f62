class TinException(Exception):
    def __init__(self, msg, *args):
        super().__init__(msg.format(*args))


class InvArgException(TinException):
    pass


class EmptySlug(TinException):
    def __init__(self):
        super().__init__("empty TIN slug")


class InvalidCountry(TinException):
    def __init__(self, country):
        super().__init__("unsupported country code: '{}'", country)
        self.country = country


class TinValidationError(TinException):
    """
    Base class for the failures raised by each stage of the validation
    pipeline. The offending TIN is kept in the `tin` attribute
    """

    reason = "invalid TIN"

    def __init__(self, tin):
        super().__init__("{}: '{}'", self.reason, tin)
        self.tin = tin


class InvalidLength(TinValidationError):
    reason = "invalid length"


class InvalidPattern(TinValidationError):
    reason = "invalid pattern"


class InvalidDate(TinValidationError):
    reason = "invalid date"


class InvalidSyntax(TinValidationError):
    reason = "invalid syntax"
