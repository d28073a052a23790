class SchedulingError(ValueError):
    """Base class for inputs the SM-2 scheduler refuses to compute with."""


class InvalidQualityError(SchedulingError):
    """Quality rating is not an integer between 0 and 5."""


class InvalidRepeatCountError(SchedulingError):
    """Repetition count passed to interval calculation is not a positive integer."""


class InvalidFactorError(SchedulingError):
    """Ease factor is not a positive number."""


class IntervalOverflowError(SchedulingError):
    """Computed interval is too large to turn into a due timestamp."""


class MalformedRecordError(ValueError):
    """Serialized card record is missing keys or carries values of the wrong type."""
