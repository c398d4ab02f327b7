class CryptaError(Exception):
    """Base class for Crypta-specific errors."""


# User/input errors
class KeyExistsError(CryptaError):
    pass


class KeyFormatError(CryptaError):
    pass


class InputReadError(CryptaError):
    pass


# Environment
class KeyGenerationError(CryptaError):
    pass


class KeyWriteError(CryptaError):
    pass


# Primitive failures
class EncryptionError(CryptaError):
    pass


class DecryptionError(CryptaError):
    """Raised for any failure to open a sealed message.

    The message never says whether the key or the data was at fault.
    """
