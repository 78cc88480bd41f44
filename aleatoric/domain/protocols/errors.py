# aleatoric/domain/protocols/errors.py


class ProtocolError(Exception):
    """Base class for errors raised while building or configuring a protocol."""
    pass


class InvalidRangeError(ProtocolError, ValueError):
    """Raised when a range end is not greater than its start."""
    def __init__(self, start, end, message=None):
        self.start = start
        self.end = end
        self.message = message or (
            f"The supplied range end must be greater than the range start "
            f"(start={start}, end={end})"
        )
        super().__init__(self.message)


class InvalidArgumentError(ProtocolError, ValueError):
    """Raised when a protocol argument violates the protocol's invariants."""
    def __init__(self, argument_name, message):
        self.argument_name = argument_name
        self.message = message
        super().__init__(message)
