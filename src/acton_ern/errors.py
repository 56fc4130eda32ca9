"""Exception hierarchy shared by the ERN model, builder and parser"""


class ErnError(Exception):
    """Base exception for ERN errors"""
    pass


class ErnFormatError(ErnError):
    """A segment or serialized ERN does not match the required format"""
    pass


class IllegalPartFormatError(ErnFormatError):
    """Part is empty, starts with ':' or contains '/'"""
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Part has invalid format (empty, starts with ':' or contains '/'): '{value}'")


class InvalidDomainError(ErnFormatError):
    """Domain is empty or contains ':' or '/'"""
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Domain has invalid format (empty, or contains ':' or '/'): '{value}'")


class ParseError(ErnFormatError):
    """Serialized ERN could not be parsed; names the offending field"""
    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Failed to parse {field}: {reason}")


class InvalidPrefixError(ErnError):
    """Builder received a component with an unrecognized routing prefix"""
    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(f"Builder Error - Invalid prefix: '{prefix}'")


class UnexpectedPartError(ErnError):
    """Builder received a component whose slot is already filled"""
    def __init__(self, part: str):
        self.part = part
        super().__init__(f"Builder Error - Unexpected part: {part}")


class MissingPartError(ErnError):
    """build() was called before a required component was supplied"""
    def __init__(self, part: str):
        self.part = part
        super().__init__(f"Builder Error - Missing required part: {part}")


class IdGenerationError(ErnError):
    """Generating a root id failed"""
    pass


class OrderingError(ErnError):
    """Builder transition attempted out of order"""
    def __init__(self, state: str, component: str):
        self.state = state
        self.component = component
        super().__init__(f"Builder Error - cannot add {component} in state {state}")
