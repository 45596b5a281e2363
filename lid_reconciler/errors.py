"""Exception hierarchy for the lid reconciler."""


class LidReconcilerError(Exception):
    """Base class for all lid reconciler errors."""
    pass


class DetectionError(LidReconcilerError):
    """Raised when the display topology cannot be resolved."""
    pass


class PolicyError(LidReconcilerError):
    """Raised when the policy is asked to decide on an unusable input."""
    pass


class ControllerError(LidReconcilerError):
    """Raised when a display or power command fails."""
    pass


class ConfigError(LidReconcilerError):
    """Raised when the configuration file cannot be loaded."""
    pass


class PreflightError(LidReconcilerError):
    """Raised when the daemon cannot start in the current environment."""
    pass
