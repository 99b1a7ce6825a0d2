"""Exception types raised by accent-sync."""


class AccentSyncError(Exception):
    """Base exception for accent-sync."""


class CorruptBlockError(AccentSyncError):
    """Raised when a managed block has only one of its two markers."""


class SettingsError(AccentSyncError):
    """Raised when the settings backend cannot be read or watched."""


class FileOperationError(AccentSyncError):
    """Raised when a target file cannot be read, written or backed up."""
