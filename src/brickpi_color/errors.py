"""
Exceptions raised by sensor bus backends.

The driver never catches these. A bus failure at construction, on a mode
change or during a read reaches the caller unchanged:

    try:
        sensor = ColorSensorDriver(SensorPort.S9)
    except InvalidPortError:
        ...

    # Any bus failure:
    except BusError:
        ...
"""


class BusError(Exception):
    """Base class for failures reported by a sensor bus."""


class InvalidPortError(BusError):
    """Raised when the bus rejects a port or a configuration for it."""


class BusReadError(BusError):
    """Raised when the bus cannot return a value for a port."""


class BusUnavailableError(BusError):
    """Raised when no usable bus backend can be found."""
