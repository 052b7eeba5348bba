class AdmissionError(Exception):
    """Base class for rejected schedule admissions."""


class InvalidTimeGranularityError(AdmissionError):
    def __init__(self, message: str = "Booking should be on the hour.") -> None:
        super().__init__(message)


class ClosedOnSundayError(AdmissionError):
    def __init__(self, message: str = "Booking system is not available on sunday") -> None:
        super().__init__(message)


class InvalidPartySizeError(AdmissionError):
    def __init__(self, message: str = "party_size must be positive") -> None:
        super().__init__(message)


class CapacityExceededError(AdmissionError):
    def __init__(self, message: str = "Number of people is over restaurant capacity per hour") -> None:
        super().__init__(message)
