"""
Line Registry - Loads line/settings configuration and builds collaborators.
"""

import logging
import os
from typing import Dict, Any, List, Optional, Type

import yaml
from dotenv import load_dotenv

from core.errors import ConfigurationError
from handlers.base_handler import BaseHandler
from handlers.http_handler import HTTPHandler
from handlers.file_handler import FileHandler
from models.line_config import LineConfig
from notifiers.email_sender import EmailSender, SMTPSender, ResendSender

# Load environment variables
load_dotenv()

REQUIRED_LINE_FIELDS = ('name', 'operator', 'url')


class LineRegistry:
    """Registry of monitored lines, retrieval handlers and the e-mail sender."""

    # Map method names to handler classes
    HANDLER_MAP: Dict[str, Type[BaseHandler]] = {
        'http': HTTPHandler,
        'file': FileHandler,
    }

    PROVIDERS = ('smtp', 'resend')

    def __init__(self, config_path: str = None, settings_path: str = None):
        """
        Initialize the registry with configuration files.

        Args:
            config_path: Path to lines.yaml
            settings_path: Path to settings.yaml
        """
        self.base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        self.logger = logging.getLogger('LineRegistry')

        if config_path is None:
            config_path = os.path.join(self.base_dir, 'config', 'lines.yaml')
        if settings_path is None:
            settings_path = os.path.join(self.base_dir, 'config', 'settings.yaml')

        self.lines = self._build_lines(self._load_config(config_path))
        self.settings = self._load_config(settings_path)
        self._handlers: Dict[str, BaseHandler] = {}

    def _load_config(self, path: str) -> Dict[str, Any]:
        """Load YAML configuration file."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f) or {}
        except FileNotFoundError:
            self.logger.warning(f"Config file not found: {path}")
            return {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML file {path}: {e}") from e

    def _build_lines(self, data: Dict[str, Any]) -> Dict[str, LineConfig]:
        lines = {}
        for key, entry in data.items():
            if not isinstance(entry, dict):
                raise ConfigurationError(f"Line '{key}' must be a mapping")

            missing = [name for name in REQUIRED_LINE_FIELDS if not entry.get(name)]
            if missing:
                raise ConfigurationError(f"Line '{key}' is missing: {', '.join(missing)}")

            method = entry.get('method', 'http')
            if method not in self.HANDLER_MAP:
                raise ConfigurationError(f"Unknown method '{method}' for line: {key}")

            try:
                lines[key] = LineConfig.from_dict(key, entry)
            except ValueError as e:
                raise ConfigurationError(f"Invalid keywords for line '{key}': {e}") from e
        return lines

    def get_line(self, key: str) -> Optional[LineConfig]:
        """Get line configuration by key."""
        return self.lines.get(key)

    def get_all_lines(self) -> List[LineConfig]:
        """All lines in configuration order."""
        return list(self.lines.values())

    def list_lines(self) -> list:
        """List all line keys."""
        return list(self.lines.keys())

    def get_settings(self) -> Dict[str, Any]:
        """Get application settings."""
        return self.settings

    def get_handler(self, line_config: LineConfig) -> BaseHandler:
        """Handler instance for a line's retrieval method."""
        method = line_config.method
        if method not in self._handlers:
            handler_class = self.HANDLER_MAP.get(method)
            if not handler_class:
                raise ConfigurationError(f"Unknown method '{method}' for line: {line_config.key}")
            self._handlers[method] = handler_class(self.settings)
        return self._handlers[method]

    def fetch_text(self, line_config: LineConfig) -> str:
        """Fetch a line's page with the handler its config names."""
        return self.get_handler(line_config).fetch_text(line_config)

    def get_recipient(self) -> str:
        return os.getenv('NOTIFY_EMAIL', '')

    def build_sender(self) -> EmailSender:
        """
        Build the e-mail sender named by settings.email.provider.

        Credentials come from the environment.
        """
        email_settings = self.settings.get('email', {})
        provider = os.getenv('EMAIL_PROVIDER') or email_settings.get('provider', 'smtp')
        timeout = self.settings.get('http', {}).get('timeout', 30)

        if provider == 'smtp':
            return SMTPSender(
                host=os.getenv('SMTP_HOST') or email_settings.get('smtp_host', 'smtp.gmail.com'),
                port=int(os.getenv('SMTP_PORT') or email_settings.get('smtp_port', 587)),
                username=os.getenv('SMTP_USER'),
                password=os.getenv('SMTP_PASS'),
                from_addr=os.getenv('FROM_EMAIL'),
                timeout=timeout,
            )
        if provider == 'resend':
            return ResendSender(
                api_key=os.getenv('RESEND_API_KEY'),
                from_addr=os.getenv('FROM_EMAIL'),
                timeout=timeout,
            )
        raise ConfigurationError(f"Unknown email provider '{provider}', expected one of {self.PROVIDERS}")
