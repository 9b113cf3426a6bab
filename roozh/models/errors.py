class RoozhError(Exception):
    pass


class InvalidArgumentError(RoozhError, ValueError):
    pass


class InvalidStateError(RoozhError, RuntimeError):
    pass


class OutOfRangeError(RoozhError, ValueError):
    pass


class LocaleConfigurationError(RoozhError, LookupError):
    pass
