"""
API client configuration
"""

import os
from dataclasses import dataclass, field


@dataclass
class ClientConfig:
    """Where and how the client reaches the API"""

    api_base_url: str = field(default_factory=lambda: os.getenv('TAPP_API_BASE_URL', 'http://localhost:8080'))
    api_prefix: str = field(default_factory=lambda: os.getenv('TAPP_API_PREFIX', '/api/v1'))
    timeout: float = field(default_factory=lambda: float(os.getenv('TAPP_API_TIMEOUT', '30')))

    def __post_init__(self):
        self.api_base_url = self.api_base_url.rstrip('/')
        self.api_prefix = self.api_prefix.rstrip('/')

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if not self.api_base_url.startswith(('http://', 'https://')):
            errors.append(f"TAPP_API_BASE_URL must be an http(s) URL, got '{self.api_base_url}'")
        if self.api_prefix and not self.api_prefix.startswith('/'):
            errors.append(f"TAPP_API_PREFIX must start with '/', got '{self.api_prefix}'")
        if self.timeout <= 0:
            errors.append("TAPP_API_TIMEOUT must be positive")

        return errors


def get_config() -> ClientConfig:
    """Get validated client configuration from the environment"""
    config = ClientConfig()
    errors = config.validate()

    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    return config
