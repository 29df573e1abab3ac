'''Runtime configuration, read from env vars.'''

from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = ('debug', 'info', 'warning', 'error', 'critical')


@dataclass
class FetchConfig:
    '''Configuration for a fetch run. The target URL is fixed and not configurable.'''

    log_level: str = 'warning'

    @classmethod
    def from_env(cls, log_level: str | None = None) -> FetchConfig:
        '''Build config from env vars (JSONFETCH_LOG_LEVEL), with optional override.'''
        level = (log_level or os.environ.get('JSONFETCH_LOG_LEVEL') or 'warning').strip().lower()
        if level not in LOG_LEVELS:
            raise ValueError(f'Unknown log level: {level}. Use one of {", ".join(LOG_LEVELS)}.')
        return cls(log_level=level)
