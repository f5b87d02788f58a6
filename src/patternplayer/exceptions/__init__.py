"""
Custom exception hierarchy for patternplayer.

The media pipeline itself never fails; these exceptions cover the ambient
layers around it (configuration files and the command line).

```
PatternPlayerError (base)
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions carry `user_message`, `technical_message`,
`recoverable` and `recovery_hint`.

```python
from patternplayer.exceptions import ConfigValidationError

raise ConfigValidationError(
    field="file_name",
    value="",
    error_msg="String should have at least 1 character",
    file_path="/path/to/player.json"
)
```
"""

from .base import PatternPlayerError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    wrap_pydantic_error,
)

__all__ = [
    # Base
    "PatternPlayerError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_pydantic_error",
]
