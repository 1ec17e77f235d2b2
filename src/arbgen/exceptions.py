class ArbGenError(Exception):
    """Base exception for arb-gen errors"""
    pass


class MissingReferenceLocaleError(ArbGenError):
    """Raised when no strings_en.arb bundle is available to define the members"""
    pass


class ConfigError(ArbGenError):
    """Raised when config.yml cannot be parsed"""
    pass
