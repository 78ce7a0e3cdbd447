"""
Exceptions raised by the hash ring
"""


class HashRingError(Exception):
    """Base class for all hash ring errors"""


class DuplicateTargetError(HashRingError, ValueError):
    """Raised when adding a target that is already registered"""

    def __init__(self, target: str):
        super().__init__(f"Target '{target}' already exists")
        self.target = target


class UnknownTargetError(HashRingError, KeyError):
    """Raised when removing a target that is not registered"""

    def __init__(self, target: str):
        super().__init__(f"Target '{target}' does not exist")
        self.target = target

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]


class InvalidArgumentError(HashRingError, ValueError):
    """Raised for out-of-range counts, weights, replica counts or hashers"""


class EmptyRingError(HashRingError, LookupError):
    """Raised when looking up a resource on a ring with no targets"""

    def __init__(self):
        super().__init__("No targets exist")


class ConfigurationError(HashRingError, ValueError):
    """Raised when ring settings cannot be parsed"""
