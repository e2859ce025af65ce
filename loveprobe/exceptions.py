#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
loveprobe - Exception Classes

All errors raised by the inspection core and the configuration layer live
here. Every error carries a stable ``error_code`` and a ``details`` mapping so
callers (and the CLI's ``--json`` mode) can report failures in a structured way.
"""

from datetime import datetime
from typing import Dict, Any, Optional


class BaseError(Exception):
    """Base class for all project-specific errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code or "ERROR"
        self.details = details or {}
        self.timestamp = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Converts the exception to a dictionary for structured logging."""
        return {
            'error_code': self.error_code,
            'message': str(self),
            'details': self.details,
            'timestamp': self.timestamp.isoformat()
        }


# =====================================================================================================
# Configuration-related errors
# =====================================================================================================

class ConfigurationError(BaseError):
    """Base class for configuration errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 file_path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        config_details = details or {}
        if file_path:
            config_details['file_path'] = str(file_path)
        super().__init__(message, error_code or "CONFIG_ERROR", config_details)


class ValidationError(ConfigurationError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        validation_details = details or {}
        if field_name:
            validation_details['field_name'] = field_name
        super().__init__(message, "VALIDATION_ERROR", None, validation_details)


# =====================================================================================================
# Inspection errors
# =====================================================================================================

class InspectionError(BaseError):
    """Base class for errors raised while inspecting a project."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 project_path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        inspection_details = details or {}
        if project_path:
            inspection_details['project_path'] = str(project_path)
        super().__init__(message, error_code or "INSPECTION_ERROR", inspection_details)


class EntryReadError(InspectionError):
    """Raised when a file inside a project folder or package cannot be read."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 project_path: Optional[str] = None,
                 entry_name: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        entry_details = details or {}
        if entry_name:
            entry_details['entry_name'] = entry_name
        super().__init__(message, error_code or "ENTRY_READ_ERROR", project_path, entry_details)


class EntryNotFoundError(EntryReadError):
    """Raised when the file, archive or archive member cannot be opened."""

    def __init__(self, message: str, project_path: Optional[str] = None,
                 entry_name: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "ENTRY_NOT_FOUND", project_path, entry_name, details)


class EmptyEntryError(EntryReadError):
    """Raised when an entry was read but holds zero bytes."""

    def __init__(self, message: str, project_path: Optional[str] = None,
                 entry_name: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "ENTRY_EMPTY", project_path, entry_name, details)


class EntryDecodeError(EntryReadError):
    """Raised when an entry's bytes are not valid text."""

    def __init__(self, message: str, project_path: Optional[str] = None,
                 entry_name: Optional[str] = None,
                 encoding: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        decode_details = details or {}
        if encoding:
            decode_details['encoding'] = encoding
        super().__init__(message, "ENTRY_DECODE", project_path, entry_name, decode_details)


class VersionNotDeterminedError(InspectionError):
    """Raised when the configuration entry holds no parseable version assignment."""

    def __init__(self, message: str, project_path: Optional[str] = None,
                 entry_name: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        version_details = details or {}
        if entry_name:
            version_details['entry_name'] = entry_name
        super().__init__(message, "VERSION_NOT_DETERMINED", project_path, version_details)
