""" Errors raised by short-id

There's only one error you would normally see: `InvalidArgument`, for a byte count that is out of range.
`ClockUnavailable` is an environment failure: the generator has no clock, so it cannot make ordered IDs.
"""

from typing import ClassVar, Optional

from .translate import _


class ShortIdError(Exception):
    """ Base class for short-id errors

    Features:
    * Message for both user and developer.
      `error`: negative message: what has gone wrong
      `fixit`: positive message: what to do to fix it
    * `info`: raw, structured, context data.
    * Use `.format()` to record `info` data and also use it for message formatting

    Example:
        raise InvalidArgument.format(
            _('Byte count must be at most {max}, got {value}'),
            name='n', value=64, max=32,
        )
    """

    # Generic title of the error class in general
    title: ClassVar[str]

    # Message: what has gone wrong
    error: str

    # Message: how to fix it
    fixit: Optional[str]

    # Structured context info for the error
    info: dict

    def __init__(self, error: str, fixit: str = None, **info):
        """ Report a failure

        Args:
            error: What has gone wrong (negative message)
            fixit: How to fix it (positive message)
            info: Additional information.
        """
        super().__init__(error)

        self.error = error
        self.fixit = fixit or getattr(self, 'fixit', None)  # get the default from a class-level value, if any
        self.info = info

    @classmethod
    def format(cls, error: str, fixit: str = None, **info):
        """ Exception with placeholders from **info

        Example:
            raise InvalidArgument.format(
                _('Invalid value: {value}'),
                name='n', value=value,
            )
        """
        return cls(
            error.format(**info),
            fixit and fixit.format(**info),
            **info
        )

    @property
    def name(self):
        """ Name of the exception class """
        return self.__class__.__name__


class InvalidArgument(ShortIdError, ValueError):
    """ Wrong argument has been provided

    Raised for byte counts that are not integers or are out of range.

    Info:
        name: The name of the failed argument
        value: The value that was given
        min: The smallest acceptable value
        max: The largest acceptable value
    """
    title = _('Invalid argument')

    def __init__(self, error: str, fixit: str = None, *, name: str, **info):
        """
        Args:
            name: The name of the argument whose value was wrong
        """
        super().__init__(error, fixit, name=name, **info)


class ClockUnavailable(ShortIdError, RuntimeError):
    """ Ordered IDs were requested, but there is no clock to read the time from """
    title = _('Clock unavailable')
    fixit = _('Use random IDs, or create the generator with a real clock')
