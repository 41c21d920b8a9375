from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Markdown code fence used around every minified file body.
CODE_FENCE: str = '```'

# Default model used by the token estimator when none is given.
DEFAULT_TOKEN_MODEL: str = 'gpt-4o'

# Environment switches recognised by the CLI and the logging helpers.
ENV_JSON_LOGS: str = 'MINICAT_JSON_LOGS'
ENV_TRACE_IO: str = 'MINICAT_TRACE_IO'
ENV_JOBS: str = 'MINICAT_JOBS'
ENV_TOKEN_MODEL: str = 'MINICAT_TOKEN_MODEL'
