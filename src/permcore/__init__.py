from .config import LogLevel, PermcoreConfig, load_config_from_env
from .exceptions import (
    ConfigurationError,
    InvalidScopeError,
    MalformedPermissionSetError,
    PermcoreError,
)
from .logging import (
    PermcoreFormatter,
    PermcoreLoggerAdapter,
    get_logger,
    safe_preview,
    setup_logging,
)
from .permissions import (
    GLOBAL_KEY,
    ActionMap,
    AnyScope,
    PermissionSet,
    ProducerScope,
    Scope,
    TypeEntry,
    TypeScope,
    find_actions,
    find_types,
    has_action,
    has_any_action,
    inherit,
    inherit_hashes,
    parse_type,
    union,
    union_hashes,
)

__all__ = [
    'GLOBAL_KEY',
    'ActionMap',
    'AnyScope',
    'PermissionSet',
    'ProducerScope',
    'Scope',
    'TypeEntry',
    'TypeScope',
    'find_actions',
    'find_types',
    'has_action',
    'has_any_action',
    'inherit',
    'inherit_hashes',
    'parse_type',
    'union',
    'union_hashes',
    'PermcoreConfig',
    'LogLevel',
    'load_config_from_env',
    'PermcoreError',
    'ConfigurationError',
    'InvalidScopeError',
    'MalformedPermissionSetError',
    'safe_preview',
    'PermcoreFormatter',
    'PermcoreLoggerAdapter',
    'setup_logging',
    'get_logger',
]
