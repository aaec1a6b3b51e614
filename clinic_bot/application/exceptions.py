class ClinicBotError(RuntimeError):
    """Base class for errors raised by the clinic bot."""
    pass


class ConfigError(ClinicBotError):
    """Raised when the clinic configuration is missing or malformed."""
    pass


class TransportError(ClinicBotError):
    """Raised when the chat transport fails to send or update presence."""
    pass


class AuthFailure(ClinicBotError):
    """Raised when the chat transport cannot authenticate to WhatsApp."""
    pass
