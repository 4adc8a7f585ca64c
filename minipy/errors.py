

class MiniPyError(Exception):
    """ Base class for all minipy errors"""
    kind = "Error"


class MiniPySyntaxError(MiniPyError):
    """ Raised when a command or expression is malformed"""
    kind = "SyntaxError"


class MiniPyNameError(MiniPyError):
    """ Raised when a name is used before it is defined"""
    kind = "NameError"


class MiniPyTypeError(MiniPyError):
    """ Raised when a value has the wrong variant for an operation"""
    kind = "TypeError"


class MiniPyValueError(MiniPyError):
    """ Raised on an out-of-range index or a division by zero"""
    kind = "ValueError"


class MiniPyResourceError(MiniPyError):
    """ Raised when a list, string or variable record cannot be allocated"""
    kind = "ResourceError"
