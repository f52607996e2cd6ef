class HoroscopeError(Exception):
    """
    Base exception for all horoscope-related domain errors.
    """
    pass


class TableIntegrityError(HoroscopeError):
    """
    Raised when a static compatibility table breaks its completeness rules.
    """
    pass


class InvalidBirthDataError(HoroscopeError):
    """
    Raised when birth inputs are missing or cannot be parsed.
    """
    pass


class CalculationError(HoroscopeError):
    """
    Raised when a horoscope calculator cannot produce a result.
    """
    pass
